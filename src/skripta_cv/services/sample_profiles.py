"""Named sample profiles for previewing the layout.

Each sample exercises a different path through the renderer: links in the
contact line and on projects, missing sections, and enough content to
spill onto further pages.
"""

from __future__ import annotations

from skripta_cv.models.profile import ProfileData

__all__ = ["get_sample_profile", "list_sample_profiles"]

_LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
    "mollit anim id est laborum. Fusce dapibus, tellus ac cursus commodo, tortor mauris "
    "condimentum nibh, ut fermentum massa justo sit amet risus."
)

_SAMPLES: dict[str, dict] = {
    "full": {
        "user": {
            "full_name": "Johnathan 'Johnny' Full",
            "email": "john.full@example.com",
            "phone_number": "+1-555-111-1111",
            "location": "New York, USA",
            "portfolio_link": "github.com/johnny-full",
            "professional_summary": (
                "Dynamic Full Stack Developer with extensive experience building robust web "
                "applications. Skilled in both frontend and backend technologies, delivering "
                "high-quality, scalable solutions."
            ),
        },
        "experience": [
            {
                "job_title": "Lead Developer",
                "company_name": "Alpha Tech",
                "start_date": "2020-01-01",
                "end_date": None,
                "responsibilities": (
                    "Lead development team.\nArchitect scalable solutions.\nMentor junior engineers."
                ),
            },
            {
                "job_title": "Software Engineer",
                "company_name": "Beta Solutions",
                "start_date": "2018-06-01",
                "end_date": "2019-12-31",
                "responsibilities": "Developed backend APIs.\nBuilt frontend components.",
            },
        ],
        "education": [
            {
                "institution_name": "State University",
                "degree": "M.Sc.",
                "field_of_study": "Software Engineering",
                "start_date": "2016-09-01",
                "end_date": "2018-05-30",
            }
        ],
        "skills": [
            {"skill_name": "Node.js", "category": "Backend"},
            {"skill_name": "React", "category": "Frontend"},
        ],
        "projects": [
            {
                "project_name": "Project Phoenix",
                "description": "A major web application.",
                "technologies": ["React", "Node.js"],
                "start_date": "2022-01-01",
                "project_link": "https://github.com/johnny-full/phoenix",
            },
            {
                "project_name": "Internal Dashboard",
                "description": "Admin tool.",
                "technologies": ["Vue.js", "Express"],
                "start_date": "2021-05-01",
                "end_date": "2021-12-31",
            },
        ],
        "target_job_title": "Lead Full Stack Developer",
    },
    "no_links": {
        "user": {
            "full_name": "Jane NoLinks",
            "email": "jane.nolinks@example.com",
            "phone_number": "+1-555-222-2222",
            "location": "London, UK",
            "professional_summary": (
                "Experienced professional seeking new opportunities. Detail-oriented and efficient."
            ),
        },
        "experience": [
            {
                "job_title": "Analyst",
                "company_name": "Omega Corp",
                "start_date": "2019-01-01",
                "responsibilities": "Data analysis.\nReport generation.",
            }
        ],
        "education": [
            {
                "institution_name": "City College",
                "degree": "B.A.",
                "field_of_study": "Economics",
                "start_date": "2015-09-01",
                "end_date": "2018-06-30",
            }
        ],
        "skills": [
            {"skill_name": "Excel", "category": "Tools"},
            {"skill_name": "Communication", "category": "Soft Skills"},
        ],
        "target_job_title": "Data Analyst",
    },
    "projects_only": {
        "user": {
            "full_name": "Sara Projects",
            "email": "sara.projects@example.com",
            "phone_number": "+1-555-444-4444",
            "location": "Berlin, Germany",
            "professional_summary": (
                "Backend specialist with a passion for open-source contributions and building "
                "efficient systems."
            ),
        },
        "projects": [
            {
                "project_name": "Open Source Library X",
                "description": "Contributed core features.",
                "technologies": ["Python"],
                "start_date": "2021-01-01",
                "project_link": "https://github.com/sara-projects/lib-x",
            },
            {
                "project_name": "Utility Tool Y",
                "description": "Command-line utility.",
                "technologies": ["Go"],
                "start_date": "2020-05-01",
                "end_date": "2020-12-31",
                "project_link": "github.com/sara-projects/tool-y",
            },
        ],
        "target_job_title": "Senior Backend Engineer",
    },
    "long_data": {
        "user": {
            "full_name": "Maximilian Longfellow",
            "email": "max.long@example.com",
            "phone_number": "+1-555-555-5555",
            "location": "Toronto, Canada",
            "portfolio_link": "github.com/max-long",
            "professional_summary": _LOREM,
        },
        "experience": [
            {
                "job_title": title,
                "company_name": company,
                "start_date": f"{year}-01-01",
                "end_date": None if index == 0 else f"{year}-12-31",
                "responsibilities": "\n".join(f"Responsibility {n}." for n in range(1, 7)),
            }
            for index, (title, company, year) in enumerate(
                [
                    ("Architect", "MegaCorp", 2022),
                    ("Senior Engineer", "Global Solutions", 2020),
                    ("Developer", "Startup X", 2019),
                    ("Junior Dev", "Old Company", 2018),
                    ("Intern", "Another Place", 2017),
                ]
            )
        ],
        "education": [
            {
                "institution_name": "Grand University",
                "degree": "PhD",
                "field_of_study": "Advanced Computing",
                "start_date": "2014-09-01",
                "end_date": "2018-05-30",
            },
            {
                "institution_name": "State College",
                "degree": "B.Sc.",
                "field_of_study": "Computer Science",
                "start_date": "2010-09-01",
                "end_date": "2014-06-30",
            },
        ],
        "skills": [
            {"skill_name": name, "category": category}
            for category, names in [
                ("Programming Languages", ["Java", "Python", "C++", "JavaScript"]),
                ("Backend", ["Spring Boot", "Django", "Node.js"]),
                ("Frontend", ["React", "Angular", "Vue.js"]),
                ("Databases", ["SQL", "NoSQL"]),
                ("Cloud", ["AWS", "Azure", "GCP"]),
                ("DevOps", ["Kubernetes", "Docker", "Terraform"]),
            ]
            for name in names
        ],
        "projects": [
            {
                "project_name": f"Project {name}",
                "description": f"Description {name[0]}.",
                "technologies": techs,
                "start_date": f"{2023 - index}-01-01",
                "end_date": None if index == 0 else f"{2023 - index}-12-31",
                "project_link": f"https://github.com/max-long/{name.lower()}" if index % 2 == 0 else None,
            }
            for index, (name, techs) in enumerate(
                [
                    ("Alpha", ["Java", "Spring"]),
                    ("Beta", ["Python", "Django"]),
                    ("Gamma", ["Node.js", "React"]),
                    ("Delta", ["C++"]),
                    ("Epsilon", ["Go", "Vue.js"]),
                ]
            )
        ],
        "target_job_title": "Principal Software Architect",
    },
    "missing_sections": {
        "user": {
            "full_name": "Alex Missing",
            "email": "alex.missing@example.com",
            "phone_number": "+1-555-666-6666",
            "location": "Seattle, USA",
            "portfolio_link": "github.com/alex-missing",
            "professional_summary": (
                "Software developer with experience in backend systems and cloud infrastructure."
            ),
        },
        "experience": [
            {
                "job_title": "Cloud Engineer",
                "company_name": "Cloud Corp",
                "start_date": "2020-07-01",
                "responsibilities": "Managed AWS resources.\nAutomated deployments.",
            }
        ],
        "skills": [
            {"skill_name": "AWS", "category": "Cloud"},
            {"skill_name": "Python", "category": "Programming Languages"},
            {"skill_name": "Terraform", "category": "DevOps"},
        ],
        "target_job_title": "Cloud Infrastructure Engineer",
    },
}


def list_sample_profiles() -> list[str]:
    """Return the names of all bundled sample profiles."""
    return list(_SAMPLES)


def get_sample_profile(name: str) -> ProfileData:
    """Return the sample profile registered under *name*.

    Raises:
        ValueError: If no sample with that name exists.
    """
    try:
        raw = _SAMPLES[name]
    except KeyError:
        available = ", ".join(_SAMPLES)
        msg = f"Unknown sample profile {name!r}. Available: {available}"
        raise ValueError(msg) from None
    return ProfileData.model_validate(raw)

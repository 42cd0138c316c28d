"""Tests for the section renderers."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from skripta_cv.constants.layout_constants import (
    DEFAULT_COMPANY,
    DEFAULT_JOB_TITLE,
    DEFAULT_SKILL_CATEGORY,
    SUBHEADING_BREAK_CHECK_HEIGHT,
    TITLE_EXPERIENCE,
    TITLE_PROJECTS,
    TITLE_SKILLS,
)
from skripta_cv.layout.runs import StyledRun, draw_run_at_cursor
from skripta_cv.layout.sections import (
    BODY,
    ITEM_TITLE,
    add_section_title,
    draw_bullet_list,
    draw_dated_heading,
    group_skills,
    render_education,
    render_experience,
    render_projects,
    render_skills,
    render_summary,
    split_bullets,
)
from skripta_cv.models import Education, Project, Skill, WorkExperience


def _texts(canvas) -> list[str]:
    return [fragment.text for fragment in canvas.fragments]


class TestSplitBullets:
    def test_one_bullet_per_line(self):
        assert split_bullets("First.\nSecond.") == ["First.", "Second."]

    def test_blank_lines_and_whitespace_dropped(self):
        assert split_bullets("  First.  \n\n   \nSecond.\r\n") == ["First.", "Second."]

    @pytest.mark.parametrize("body", [None, "", "\n\n"])
    def test_empty(self, body):
        assert split_bullets(body) == []


class TestGroupSkills:
    def test_groups_keep_first_seen_order(self):
        skills = [
            Skill(skill_name="React", category="Frontend"),
            Skill(skill_name="Django", category="Backend"),
            Skill(skill_name="Vue.js", category="Frontend"),
        ]
        assert group_skills(skills) == {"Frontend": ["React", "Vue.js"], "Backend": ["Django"]}

    def test_missing_category_uses_default(self):
        groups = group_skills([Skill(skill_name="Git"), Skill(skill_name="Make", category="")])
        assert groups == {DEFAULT_SKILL_CATEGORY: ["Git", "Make"]}


class TestSectionTitle:
    def test_title_drawn_bold(self, canvas):
        add_section_title(canvas, TITLE_SKILLS)
        fragment = canvas.fragments[0]
        assert fragment.text == TITLE_SKILLS
        assert fragment.style.bold is True

    def test_title_never_orphaned_at_bottom(self, canvas):
        canvas.y = canvas.bottom_limit - 20
        add_section_title(canvas, TITLE_SKILLS)
        assert canvas.page_count == 2
        assert canvas.fragments[0].page == 2


class TestBulletList:
    def test_each_item_drawn_with_marker(self, canvas):
        draw_bullet_list(canvas, ["One.", "Two."])
        assert _texts(canvas) == ["One.", "Two."]
        first, second = canvas.fragments
        assert first.x > canvas.margins.left
        assert second.y > first.y

    def test_bullet_moves_to_new_page_when_full(self, canvas):
        canvas.y = canvas.bottom_limit - 5
        draw_bullet_list(canvas, ["Late bullet."])
        assert canvas.fragments[0].page == 2


class TestDatedHeading:
    def test_date_right_aligned_on_heading_row(self, canvas):
        run = StyledRun.of(("Lead Developer", ITEM_TITLE))
        top = canvas.y
        draw_dated_heading(canvas, run, "Jan 2020 - Present")
        date = next(f for f in canvas.fragments if f.text == "Jan 2020 - Present")
        title = next(f for f in canvas.fragments if f.text == "Lead Developer")
        assert date.y == title.y == top
        right = canvas.margins.left + canvas.content_width
        assert date.x + canvas.width_of(date.text, BODY) == pytest.approx(right)
        assert canvas.y > top

    def test_no_date(self, canvas):
        placement = draw_dated_heading(canvas, StyledRun.of(("Title", ITEM_TITLE)), "")
        assert _texts(canvas) == ["Title"]
        assert placement.segments[0].max_width == canvas.content_width


class TestSummary:
    def test_default_title(self, canvas):
        render_summary(canvas, None, "Builds things.")
        assert _texts(canvas) == ["Professional Summary", "Builds things."]

    def test_target_title_used(self, canvas):
        render_summary(canvas, "Data Analyst", None)
        assert _texts(canvas) == ["Data Analyst"]


class TestExperience:
    def test_empty_list_draws_nothing(self, canvas):
        render_experience(canvas, [], "Present")
        assert canvas.fragments == []

    def test_heading_and_bullets(self, canvas):
        exp = WorkExperience(
            job_title="Lead Developer",
            company_name="Alpha Tech",
            start_date="2020-01-01",
            responsibilities="Lead team.\nShip code.",
        )
        render_experience(canvas, [exp], "Present")
        texts = _texts(canvas)
        assert texts[0] == TITLE_EXPERIENCE
        assert "Jan 2020 - Present" in texts
        assert texts[-2:] == ["Lead team.", "Ship code."]
        heading = [f for f in canvas.fragments if f.style.size == ITEM_TITLE.size]
        assert "".join(f.text for f in heading) == "Lead Developer | Alpha Tech"

    def test_placeholders_for_missing_names(self, canvas):
        render_experience(canvas, [WorkExperience()], "Present")
        texts = _texts(canvas)
        assert DEFAULT_JOB_TITLE in texts
        assert DEFAULT_COMPANY in texts


class TestEducation:
    def test_degree_in_field(self, canvas):
        edu = Education(
            institution_name="State University",
            degree="M.Sc.",
            field_of_study="Software Engineering",
            start_date="2016-09-01",
            end_date="2018-05-30",
        )
        render_education(canvas, [edu], "Present")
        texts = _texts(canvas)
        assert "M.Sc. in Software Engineering" in texts
        assert "State University" in texts
        assert "Sep 2016 - May 2018" in texts


class TestSkills:
    def test_wrapping_groups_stay_above_bottom_margin(self, canvas):
        skills = [
            Skill(skill_name=f"Skill {category}-{n}", category=f"Category {category}")
            for category in range(40)
            for n in range(40)
        ]
        cursor_after_group = []

        def record(*args, **kwargs):
            placement = draw_run_at_cursor(*args, **kwargs)
            cursor_after_group.append((canvas.page_count, canvas.y))
            return placement

        with patch("skripta_cv.layout.sections.draw_run_at_cursor", side_effect=record):
            render_skills(canvas, skills)

        assert len(cursor_after_group) == 40
        assert canvas.page_count > 1
        for _page, y in cursor_after_group:
            assert y <= canvas.bottom_limit
        for fragment in canvas.fragments:
            assert fragment.y + fragment.height <= canvas.bottom_limit + 0.01

        labels = [f for f in canvas.fragments if f.text.startswith("Category ")]
        values = [f for f in canvas.fragments if f.text.startswith("Skill ")]
        assert [f.page for f in labels] == [f.page for f in values]

    def test_category_label_and_names(self, canvas):
        skills = [Skill(skill_name="AWS", category="Cloud"), Skill(skill_name="GCP", category="Cloud")]
        render_skills(canvas, skills)
        assert _texts(canvas) == [TITLE_SKILLS, "Cloud: ", "AWS, GCP"]
        label = canvas.fragments[1]
        value = canvas.fragments[2]
        assert label.style.bold is True
        assert label.y == value.y


class TestProjects:
    def test_linked_project_gets_hotspot(self, canvas):
        project = Project(
            project_name="Phoenix",
            technologies=["React", "Node.js"],
            start_date="2022-01-01",
            project_link="github.com/x/phoenix",
            description="Built it.",
        )
        render_projects(canvas, [project], "Present")
        texts = _texts(canvas)
        assert texts[0] == TITLE_PROJECTS
        assert "Technologies: " in texts
        assert "React, Node.js" in texts
        assert [h.url for h in canvas.hotspots] == ["https://github.com/x/phoenix"]
        name = next(f for f in canvas.fragments if f.text == "Phoenix")
        assert name.style.color == (0, 0, 255)

    def test_long_technology_list_moves_to_next_page(self, canvas):
        project = Project(
            project_name="Platform",
            technologies=[f"Library{n}" for n in range(80)],
        )
        canvas.y = canvas.bottom_limit - SUBHEADING_BREAK_CHECK_HEIGHT - 5
        render_projects(canvas, [project], "Present")
        label = next(f for f in canvas.fragments if f.text == "Technologies: ")
        assert label.page == 2
        assert canvas.y <= canvas.bottom_limit
        for fragment in canvas.fragments:
            assert fragment.y + fragment.height <= canvas.bottom_limit + 0.01

    def test_malformed_link_recorded_as_defect(self, canvas):
        render_projects(canvas, [Project(project_name="Broken", project_link="http://")], "Present")
        assert canvas.hotspots == []
        assert [d.kind for d in canvas.defects] == ["malformed_url"]
        name = next(f for f in canvas.fragments if f.text == "Broken")
        assert name.style.bold is True

"""Input data contract for CV rendering.

A :class:`ProfileData` instance is the only thing the layout engine reads.
The calling layer is responsible for fetching the records and ordering them
(experience, education and projects newest first by start date; skills by
category then name) before handing them over.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DateValue",
    "Education",
    "ProfileData",
    "Project",
    "Skill",
    "UserProfile",
    "WorkExperience",
]

DateValue = date | datetime | str | None


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class UserProfile(_Record):
    """Personal details shown in the CV header and summary."""

    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    location: str | None = None
    portfolio_link: str | None = None
    professional_summary: str | None = None


class WorkExperience(_Record):
    """A single work-history entry."""

    job_title: str = ""
    company_name: str = ""
    start_date: DateValue = None
    end_date: DateValue = None
    responsibilities: str | None = Field(None, description="Newline separated duties")


class Education(_Record):
    """A single education entry."""

    institution_name: str = ""
    degree: str | None = None
    field_of_study: str | None = None
    start_date: DateValue = None
    end_date: DateValue = None


class Skill(_Record):
    """A named skill with an optional grouping category."""

    skill_name: str
    category: str | None = None


class Project(_Record):
    """A portfolio project."""

    project_name: str | None = None
    description: str | None = Field(None, description="Newline separated highlights")
    technologies: list[str] | None = None
    start_date: DateValue = None
    end_date: DateValue = None
    project_link: str | None = None


class ProfileData(_Record):
    """Everything needed to render one CV."""

    user: UserProfile
    experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    target_job_title: str | None = Field(None, alias="targetJobTitle")

"""Data models and type definitions"""

from skripta_cv.models.profile import (
    Education,
    ProfileData,
    Project,
    Skill,
    UserProfile,
    WorkExperience,
)

__all__ = [
    "Education",
    "ProfileData",
    "Project",
    "Skill",
    "UserProfile",
    "WorkExperience",
]

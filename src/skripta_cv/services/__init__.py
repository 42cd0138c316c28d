"""Service layer for CV generation."""

from skripta_cv.services.cv_generator import (
    CvDocumentBuilder,
    RenderedCv,
    generate_cv_pdf,
    render_cv,
)
from skripta_cv.services.sample_profiles import get_sample_profile, list_sample_profiles

__all__ = [
    "CvDocumentBuilder",
    "RenderedCv",
    "generate_cv_pdf",
    "get_sample_profile",
    "list_sample_profiles",
    "render_cv",
]

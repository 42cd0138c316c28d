"""Paginated PDF rendering of CV profile data."""

from skripta_cv.exceptions import CvGenerationError, LayoutError, SerializationError
from skripta_cv.models import ProfileData
from skripta_cv.services import RenderedCv, generate_cv_pdf, render_cv

__all__ = [
    "CvGenerationError",
    "LayoutError",
    "ProfileData",
    "RenderedCv",
    "SerializationError",
    "generate_cv_pdf",
    "render_cv",
]


def main() -> int:
    """Entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from skripta_cv.cli import main as cli_main

    return cli_main()

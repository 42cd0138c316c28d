"""Route handlers for the API."""

from skripta_cv.api.routes import cvs, health

__all__ = [
    "cvs",
    "health",
]

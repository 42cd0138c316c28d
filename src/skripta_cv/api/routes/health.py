"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter

from skripta_cv.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return the API status and the page format new CVs are rendered on."""
    return {"status": "healthy", "page_format": get_settings().page_format}

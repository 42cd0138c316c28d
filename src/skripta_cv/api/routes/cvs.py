"""CV generation routes for the API."""

from __future__ import annotations

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from skripta_cv.api.schemas.cvs import CvLayoutResponse, DefectResponse, HotspotResponse
from skripta_cv.config import LayoutSettings, get_settings
from skripta_cv.exceptions import CvGenerationError
from skripta_cv.models import ProfileData
from skripta_cv.services import RenderedCv, render_cv

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cvs", tags=["cvs"])


def _render_or_500(profile: ProfileData, settings: LayoutSettings) -> RenderedCv:
    """Render *profile*, mapping generation failures to HTTP 500."""
    try:
        return render_cv(profile, settings)
    except CvGenerationError:
        logger.exception("CV generation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="CV generation failed",
        ) from None


def _download_name(profile: ProfileData) -> str:
    base = re.sub(r"[^A-Za-z0-9_-]+", "_", profile.user.full_name or "").strip("_")
    return f"{base or 'Generated'}_CV.pdf"


@router.post(
    "/generate",
    responses={200: {"content": {"application/pdf": {}}}},
)
def generate_cv_endpoint(
    profile: ProfileData,
    settings: Annotated[LayoutSettings, Depends(get_settings)],
) -> Response:
    """Generate and download a PDF CV for the posted profile."""
    rendered = _render_or_500(profile, settings)
    return Response(
        content=rendered.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{_download_name(profile)}"'},
    )


@router.post("/layout", response_model=CvLayoutResponse)
def layout_cv_endpoint(
    profile: ProfileData,
    settings: Annotated[LayoutSettings, Depends(get_settings)],
) -> CvLayoutResponse:
    """Render the CV and report its page count, link hotspots and skipped decorations."""
    rendered = _render_or_500(profile, settings)
    return CvLayoutResponse(
        page_count=rendered.page_count,
        size_bytes=len(rendered.content),
        hotspots=[
            HotspotResponse(
                page=h.page,
                x=h.x,
                y=h.y,
                width=h.width,
                height=h.height,
                url=h.url,
            )
            for h in rendered.hotspots
        ],
        defects=[DefectResponse(kind=d.kind, message=d.message) for d in rendered.defects],
    )

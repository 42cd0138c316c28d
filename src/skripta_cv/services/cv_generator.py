"""CV generation service.

Lays out a :class:`ProfileData` onto a fresh canvas in a fixed order
(header, contact line, rule, summary, experience, education, skills,
projects) and serializes the pages into a single PDF buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from skripta_cv.config import default_settings
from skripta_cv.constants.layout_constants import (
    COLOR_SUBTITLE,
    DEFAULT_NAME,
    FONT_SIZE_BODY,
    FONT_SIZE_NAME,
    FONT_SIZE_SUBTITLE,
    SPACING_AFTER_TITLE_LINES,
    SPACING_HEADER_LINES,
)
from skripta_cv.exceptions import CvGenerationError, LayoutDefect, LayoutError
from skripta_cv.layout.canvas import Canvas, LinkHotspot, TextFragment
from skripta_cv.layout.contact import build_contact_items, render_contact_line
from skripta_cv.layout.metrics import TextStyle
from skripta_cv.layout.sections import (
    render_education,
    render_experience,
    render_projects,
    render_skills,
    render_summary,
)

if TYPE_CHECKING:
    from skripta_cv.config import LayoutSettings
    from skripta_cv.models.profile import ProfileData

logger = logging.getLogger(__name__)

__all__ = [
    "CvDocumentBuilder",
    "RenderedCv",
    "build_document_info",
    "generate_cv_pdf",
    "render_cv",
]

_NAME_STYLE = TextStyle(size=FONT_SIZE_NAME, bold=True)
_SUBTITLE_STYLE = TextStyle(size=FONT_SIZE_SUBTITLE, color=COLOR_SUBTITLE)
_BODY_STYLE = TextStyle(size=FONT_SIZE_BODY)


@dataclass(slots=True, frozen=True)
class RenderedCv:
    """A finished CV plus the layout facts recorded while drawing it."""

    content: bytes
    page_count: int
    hotspots: tuple[LinkHotspot, ...]
    fragments: tuple[TextFragment, ...]
    defects: tuple[LayoutDefect, ...]


def build_document_info(profile: ProfileData) -> dict[str, str]:
    """PDF metadata (title, author, subject, keywords) for *profile*."""
    name = profile.user.full_name
    target = profile.target_job_title
    skills = ", ".join(skill.skill_name for skill in profile.skills)
    display_name = name or DEFAULT_NAME
    return {
        "title": f"{display_name} - {target}" if target else f"{display_name} - CV",
        "author": name or "Skripta User",
        "subject": f"CV for {target}" if target else "Curriculum Vitae",
        "keywords": f"CV, Resume, {target or ''}, {skills}",
    }


class CvDocumentBuilder:
    """Owns one canvas and draws one profile onto it.

    A builder is single-use: create one per document.
    """

    def __init__(self, profile: ProfileData, settings: LayoutSettings | None = None) -> None:
        self.profile = profile
        self.settings = settings or default_settings()
        self.canvas = Canvas(self.settings)

    def build(self) -> RenderedCv:
        profile = self.profile
        canvas = self.canvas
        ongoing = self.settings.ongoing_label

        canvas.set_document_info(**build_document_info(profile), creator=self.settings.creator)
        self._add_header()
        self._add_contact_line()
        self._add_rule()

        render_summary(canvas, profile.target_job_title, profile.user.professional_summary)
        render_experience(canvas, profile.experience, ongoing)
        render_education(canvas, profile.education, ongoing)
        render_skills(canvas, profile.skills)
        render_projects(canvas, profile.projects, ongoing)

        content = canvas.serialize()
        logger.debug("Rendered CV: %d page(s), %d bytes", canvas.page_count, len(content))
        return RenderedCv(
            content=content,
            page_count=canvas.page_count,
            hotspots=tuple(canvas.hotspots),
            fragments=tuple(canvas.fragments),
            defects=tuple(canvas.defects),
        )

    # -- header ------------------------------------------------------------

    def _add_header(self) -> None:
        canvas = self.canvas
        canvas.draw_text(self.profile.user.full_name or DEFAULT_NAME, _NAME_STYLE, align="C")
        canvas.move_down(SPACING_HEADER_LINES / 2)

        target = self.profile.target_job_title
        if target:
            canvas.draw_text(target, _SUBTITLE_STYLE, align="C")
            canvas.move_down(SPACING_HEADER_LINES)
        else:
            canvas.move_down(SPACING_HEADER_LINES / 2)

    def _add_contact_line(self) -> None:
        items = build_contact_items(self.profile.user)
        if items:
            render_contact_line(self.canvas, items)

    def _add_rule(self) -> None:
        canvas = self.canvas
        canvas.move_down(SPACING_HEADER_LINES * 1.5)
        canvas.draw_rule()
        canvas.move_down(SPACING_AFTER_TITLE_LINES)
        canvas.set_style(_BODY_STYLE)


def render_cv(profile: ProfileData, settings: LayoutSettings | None = None) -> RenderedCv:
    """Lay out and serialize *profile*.

    Raises:
        CvGenerationError: If drawing or serialization failed. No partial
            document is ever returned.
    """
    try:
        return CvDocumentBuilder(profile, settings).build()
    except CvGenerationError:
        raise
    except Exception as exc:
        logger.exception("CV layout failed for %r", profile.user.full_name)
        raise LayoutError(f"CV layout failed: {exc}") from exc


def generate_cv_pdf(profile: ProfileData, settings: LayoutSettings | None = None) -> bytes:
    """Return the finished PDF for *profile* as bytes."""
    return render_cv(profile, settings).content

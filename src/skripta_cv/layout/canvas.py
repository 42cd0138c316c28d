"""Mutable drawing surface with a vertical cursor and paginated output.

A :class:`Canvas` wraps a single ``FPDF`` document for the lifetime of one
render. Every layout function receives the canvas explicitly; nothing here
is shared between documents.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from skripta_cv.config import LayoutSettings, default_settings
from skripta_cv.constants.layout_constants import (
    BULLET_SIZE,
    COLOR_RULE,
    MIN_SEGMENT_WIDTH,
    PAGE_BREAK_BUFFER,
    RULE_WIDTH,
)
from skripta_cv.exceptions import LayoutDefect, SerializationError
from skripta_cv.layout.metrics import (
    Measurement,
    TextStyle,
    apply_style,
    measure_text,
    sanitize_text,
)

logger = logging.getLogger(__name__)

__all__ = ["Canvas", "LinkHotspot", "Margins", "TextFragment"]


@dataclass(slots=True, frozen=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(slots=True, frozen=True)
class LinkHotspot:
    """A clickable rectangle registered on a page (top-left origin)."""

    page: int
    x: float
    y: float
    width: float
    height: float
    url: str


@dataclass(slots=True, frozen=True)
class TextFragment:
    """A piece of text as it was placed on a page.

    ``height`` covers only the lines drawn on ``page``; flowing text that
    continues on the next page is not counted here.
    """

    page: int
    x: float
    y: float
    text: str
    style: TextStyle
    height: float


class Canvas:
    """Cursor-tracking wrapper around an ``FPDF`` document.

    Coordinates are PDF points with the origin at the top-left corner of the
    page. ``y`` is the vertical cursor used by flowing text.
    """

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        settings = settings or default_settings()
        self.pdf = FPDF(orientation="P", unit="pt", format=settings.page_format)
        self.pdf.set_margins(settings.margin, settings.margin, settings.margin)
        self.pdf.set_auto_page_break(auto=True, margin=settings.margin)
        self.pdf.set_compression(settings.compress)
        # Text is positioned exactly at the requested x; no cell padding.
        self.pdf.c_margin = 0
        self.style = TextStyle()
        self.fragments: list[TextFragment] = []
        self.hotspots: list[LinkHotspot] = []
        self.defects: list[LayoutDefect] = []
        self.pdf.add_page()
        apply_style(self.pdf, self.style)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def page_width(self) -> float:
        return self.pdf.w

    @property
    def page_height(self) -> float:
        return self.pdf.h

    @property
    def margins(self) -> Margins:
        pdf = self.pdf
        return Margins(top=pdf.t_margin, right=pdf.r_margin, bottom=pdf.b_margin, left=pdf.l_margin)

    @property
    def content_width(self) -> float:
        return self.pdf.w - self.pdf.l_margin - self.pdf.r_margin

    @property
    def bottom_limit(self) -> float:
        """Lowest y that content may reach on the current page."""
        return self.pdf.h - self.pdf.b_margin

    @property
    def y(self) -> float:
        return self.pdf.get_y()

    @y.setter
    def y(self, value: float) -> None:
        self.pdf.set_y(value)

    @property
    def page_count(self) -> int:
        return self.pdf.page_no()

    # ------------------------------------------------------------------
    # Style and measurement
    # ------------------------------------------------------------------

    def set_style(self, style: TextStyle) -> TextStyle:
        """Make *style* the active style and return it."""
        apply_style(self.pdf, style)
        self.style = style
        return style

    def measure(self, text: str, style: TextStyle | None = None, max_width: float | None = None) -> Measurement:
        """Measure *text* in *style* (default: the active style).

        Measuring activates the style, so a subsequent draw uses the same font.
        """
        style = self.set_style(style or self.style)
        return measure_text(self.pdf, style, text, self.content_width if max_width is None else max_width)

    def width_of(self, text: str, style: TextStyle | None = None) -> float:
        """Natural (unwrapped) width of *text*."""
        self.set_style(style or self.style)
        return self.pdf.get_string_width(sanitize_text(text))

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw_text(
        self,
        text: str,
        style: TextStyle | None = None,
        *,
        align: str = "L",
        x: float | None = None,
        width: float | None = None,
    ) -> None:
        """Draw flowing text at the cursor and advance the cursor below it.

        Text that runs past the bottom margin continues on a new page.
        """
        style = self.set_style(style or self.style)
        clean = sanitize_text(text)
        if not clean.strip():
            return
        left = self.pdf.l_margin if x is None else x
        if width is None:
            width = self.content_width - (left - self.pdf.l_margin)
        if self.y + style.line_height > self.bottom_limit:
            self.start_new_page()
        wrapped = measure_text(self.pdf, style, clean, width)
        lines_left = max(1, math.floor((self.bottom_limit - self.y) / style.line_height))
        on_page = min(wrapped.height, lines_left * style.line_height)
        self._record(left, self.y, clean, style, on_page)
        self.pdf.set_x(left)
        self.pdf.multi_cell(
            max(width, MIN_SEGMENT_WIDTH),
            style.line_height,
            clean,
            align=align,
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )

    def draw_text_at(
        self,
        text: str,
        x: float,
        y: float,
        style: TextStyle | None = None,
        *,
        width: float | None = None,
        align: str = "L",
    ) -> Measurement:
        """Draw text at an absolute position without moving the cursor.

        Without *width* the text is drawn on one line at its natural width.
        With *width* it is aligned inside that box and wrapped if it does not
        fit. Returns the drawn width and height.
        """
        style = self.set_style(style or self.style)
        clean = sanitize_text(text)
        if not clean:
            return Measurement(0.0, 0.0)
        if not (math.isfinite(x) and math.isfinite(y)):
            self.report_defect("invalid_geometry", f"Skipped text {clean!r} at ({x}, {y})")
            return Measurement(0.0, 0.0)

        pdf = self.pdf
        natural = pdf.get_string_width(clean)
        box = natural if width is None else max(width, MIN_SEGMENT_WIDTH)
        saved_x, saved_y = pdf.get_x(), pdf.get_y()
        auto_break = pdf.auto_page_break
        # Absolute draws are laid out by hand and never paginate.
        pdf.set_auto_page_break(False, margin=pdf.b_margin)
        try:
            pdf.set_xy(x, y)
            if natural <= box:
                pdf.cell(box, style.line_height, clean, align=align)
                drawn = Measurement(natural, style.line_height)
            else:
                pdf.multi_cell(
                    box,
                    style.line_height,
                    clean,
                    align=align,
                    new_x=XPos.RIGHT,
                    new_y=YPos.NEXT,
                )
                drawn = Measurement(box, pdf.get_y() - y)
        finally:
            pdf.set_auto_page_break(auto_break, margin=pdf.b_margin)
            pdf.set_xy(saved_x, saved_y)

        offset = 0.0
        if natural < box and align == "R":
            offset = box - natural
        elif natural < box and align == "C":
            offset = (box - natural) / 2
        self._record(x + offset, y, clean, style, drawn.height)
        return drawn

    def draw_rule(self, color: tuple[int, int, int] = COLOR_RULE, line_width: float = RULE_WIDTH) -> None:
        """Draw a horizontal line across the content width at the cursor."""
        pdf = self.pdf
        pdf.set_draw_color(*color)
        pdf.set_line_width(line_width)
        pdf.line(pdf.l_margin, self.y, pdf.w - pdf.r_margin, self.y)

    def draw_bullet(self, x: float, y: float, size: float = BULLET_SIZE) -> None:
        """Draw a small filled square bullet with its top-left at (x, y)."""
        self.pdf.set_fill_color(*self.style.color)
        self.pdf.rect(x, y, size, size, style="F")

    def move_down(self, lines: float = 1.0, style: TextStyle | None = None) -> None:
        """Advance the cursor by *lines* line heights of *style*.

        The cursor never moves past the bottom margin; the next draw call
        decides whether a new page is needed.
        """
        line_height = (style or self.style).line_height
        self.y = min(self.y + lines * line_height, self.bottom_limit)

    def start_new_page(self) -> None:
        """Append a page and reset the cursor to the top margin."""
        self.pdf.add_page()
        apply_style(self.pdf, self.style)
        logger.debug("Started page %d", self.page_count)

    def ensure_space(self, estimated_height: float) -> bool:
        """Start a new page if *estimated_height* would not fit below the cursor.

        Returns:
            True if a page break was inserted.
        """
        if not (math.isfinite(estimated_height) and math.isfinite(self.y)):
            self.report_defect(
                "invalid_geometry",
                f"Page break check skipped for height={estimated_height} at y={self.y}",
            )
            return False
        if self.y + estimated_height + PAGE_BREAK_BUFFER > self.bottom_limit:
            logger.debug("Page break before block of height %.1f at y=%.1f", estimated_height, self.y)
            self.start_new_page()
            return True
        return False

    def add_link(self, x: float, y: float, width: float, height: float, url: str) -> LinkHotspot | None:
        """Register a clickable hotspot on the current page.

        Hotspots with non-finite coordinates or a non-positive size are
        dropped and reported as defects.
        """
        values = (x, y, width, height)
        if not all(math.isfinite(v) for v in values) or width <= 0 or height <= 0:
            self.report_defect(
                "invalid_geometry",
                f"Skipped link to {url} with geometry x={x}, y={y}, w={width}, h={height}",
            )
            return None
        self.pdf.link(x, y, width, height, url)
        hotspot = LinkHotspot(self.page_count, x, y, width, height, url)
        self.hotspots.append(hotspot)
        return hotspot

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def set_document_info(
        self,
        *,
        title: str,
        author: str,
        subject: str,
        keywords: str,
        creator: str,
    ) -> None:
        self.pdf.set_title(title)
        self.pdf.set_author(author)
        self.pdf.set_subject(subject)
        self.pdf.set_keywords(keywords)
        self.pdf.set_creator(creator)

    def serialize(self) -> bytes:
        """Write all pages, in creation order, into one PDF buffer."""
        try:
            return bytes(self.pdf.output())
        except Exception as exc:
            logger.exception("Failed to serialize %d page(s)", self.page_count)
            raise SerializationError(f"Could not serialize document: {exc}") from exc

    def report_defect(self, kind: str, message: str) -> None:
        """Log a recoverable problem and keep laying out."""
        logger.warning(message)
        self.defects.append(LayoutDefect(kind, message))

    def _record(self, x: float, y: float, text: str, style: TextStyle, height: float) -> None:
        self.fragments.append(TextFragment(self.page_count, x, y, text, style, height))

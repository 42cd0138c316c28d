"""Text measurement on top of fpdf2's core-font metrics."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from fpdf.enums import MethodReturnValue

from skripta_cv.constants.layout_constants import (
    COLOR_BLACK,
    FONT_FAMILY,
    FONT_SIZE_BODY,
    LINE_HEIGHT_FACTOR,
    MIN_SEGMENT_WIDTH,
)

if TYPE_CHECKING:
    from fpdf import FPDF

__all__ = [
    "Measurement",
    "TextStyle",
    "apply_style",
    "measure_text",
    "sanitize_text",
]


@dataclass(slots=True, frozen=True)
class TextStyle:
    """Font, size and fill colour used to draw a piece of text."""

    size: float = FONT_SIZE_BODY
    bold: bool = False
    underline: bool = False
    color: tuple[int, int, int] = COLOR_BLACK
    family: str = FONT_FAMILY

    @property
    def font_style(self) -> str:
        """fpdf2 style string (``""``, ``"B"``, ``"U"`` or ``"BU"``)."""
        return ("B" if self.bold else "") + ("U" if self.underline else "")

    @property
    def line_height(self) -> float:
        return self.size * LINE_HEIGHT_FACTOR

    def with_(self, **changes: object) -> TextStyle:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)  # type: ignore[arg-type]


@dataclass(slots=True, frozen=True)
class Measurement:
    """Natural width and wrapped height of a string."""

    width: float
    height: float


def sanitize_text(text: str) -> str:
    """Coerce *text* into the Latin-1 range supported by the core fonts."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


def apply_style(pdf: FPDF, style: TextStyle) -> None:
    """Make *style* the active font and text colour of *pdf*."""
    pdf.set_font(style.family, style.font_style, style.size)
    pdf.set_text_color(*style.color)


def measure_text(pdf: FPDF, style: TextStyle, text: str, max_width: float) -> Measurement:
    """Measure *text* as it would be drawn with *style*.

    The style is applied before measuring so the result always matches the
    font used for drawing. ``width`` is the unwrapped width; ``height`` is
    the height of the text wrapped into ``max_width``.
    """
    apply_style(pdf, style)
    clean = sanitize_text(text)
    if not clean:
        return Measurement(0.0, 0.0)
    width = pdf.get_string_width(clean)
    lines = pdf.multi_cell(
        max(max_width, MIN_SEGMENT_WIDTH),
        style.line_height,
        clean,
        align="L",
        dry_run=True,
        output=MethodReturnValue.LINES,
    )
    return Measurement(width, len(lines) * style.line_height)

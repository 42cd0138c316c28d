"""Single-line composition of differently styled text segments.

A :class:`StyledRun` is a value describing one logical line such as
``Job Title | Company``. :func:`layout_run` works out where every segment
goes; :func:`draw_run` draws it in one pass, so no drawing call ever depends
on cursor state left behind by a previous one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from skripta_cv.constants.layout_constants import MIN_SEGMENT_WIDTH, PAGE_BREAK_BUFFER

if TYPE_CHECKING:
    from skripta_cv.layout.canvas import Canvas
    from skripta_cv.layout.metrics import TextStyle

logger = logging.getLogger(__name__)

__all__ = [
    "PlacedSegment",
    "RunPlacement",
    "StyledRun",
    "TextSegment",
    "draw_placement",
    "draw_run",
    "draw_run_at_cursor",
    "layout_run",
]


@dataclass(slots=True, frozen=True)
class TextSegment:
    """Styled text; ``continued`` keeps the next segment on the same row."""

    text: str
    style: TextStyle
    continued: bool = True


@dataclass(slots=True, frozen=True)
class StyledRun:
    segments: tuple[TextSegment, ...]

    @classmethod
    def of(cls, *parts: tuple[str, TextStyle]) -> StyledRun:
        """Build a run from ``(text, style)`` pairs; only the last one ends the line."""
        last = len(parts) - 1
        return cls(
            tuple(
                TextSegment(text, style, continued=index < last)
                for index, (text, style) in enumerate(parts)
            )
        )

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass(slots=True, frozen=True)
class PlacedSegment:
    """Where a segment landed and the column width it was given."""

    segment: TextSegment
    x: float
    y: float
    max_width: float
    width: float
    height: float


@dataclass(slots=True, frozen=True)
class RunPlacement:
    segments: tuple[PlacedSegment, ...]
    height: float


def layout_run(canvas: Canvas, run: StyledRun, x: float, y: float, width: float) -> RunPlacement:
    """Compute segment positions for *run* inside the box starting at (x, y).

    Each segment gets the width left over after the segments before it on
    the same row. That width never drops below ``MIN_SEGMENT_WIDTH``: once
    the row is that full, the next segment starts a new row at *x*.
    """
    placed: list[PlacedSegment] = []
    cursor_x = x
    row_top = y
    row_height = 0.0

    for segment in run.segments:
        remaining = x + width - cursor_x
        if remaining < MIN_SEGMENT_WIDTH and cursor_x > x:
            row_top += row_height
            cursor_x = x
            row_height = 0.0
            remaining = width
        max_width = max(remaining, MIN_SEGMENT_WIDTH)

        measured = canvas.measure(segment.text, segment.style, max_width)
        drawn_width = min(measured.width, max_width)
        placed.append(PlacedSegment(segment, cursor_x, row_top, max_width, drawn_width, measured.height))
        row_height = max(row_height, measured.height)
        cursor_x += drawn_width

        if not segment.continued:
            row_top += row_height
            cursor_x = x
            row_height = 0.0

    return RunPlacement(tuple(placed), row_top + row_height - y)


def draw_placement(canvas: Canvas, placement: RunPlacement) -> None:
    """Draw segments exactly where :func:`layout_run` put them."""
    for placed in placement.segments:
        canvas.draw_text_at(
            placed.segment.text,
            placed.x,
            placed.y,
            placed.segment.style,
            width=placed.max_width,
        )


def draw_run(canvas: Canvas, run: StyledRun, x: float, y: float, width: float) -> RunPlacement:
    """Draw *run* at an absolute position; the cursor is left untouched."""
    placement = layout_run(canvas, run, x, y, width)
    draw_placement(canvas, placement)
    return placement


def draw_run_at_cursor(canvas: Canvas, run: StyledRun, *, width: float | None = None) -> RunPlacement | None:
    """Draw *run* at the left margin on the cursor row and move below it.

    The whole run is kept on one page: when it does not fit below the cursor
    a new page is started first. A run taller than an empty page cannot be
    kept together and is flowed as plain text in its last segment's style
    instead; in that case *None* is returned.
    """
    left = canvas.margins.left
    width = canvas.content_width if width is None else width

    placement = layout_run(canvas, run, left, canvas.y, width)
    if placement.height + PAGE_BREAK_BUFFER > canvas.bottom_limit - canvas.margins.top:
        logger.debug("Run of height %.1f exceeds a page; flowing as plain text", placement.height)
        canvas.draw_text(run.text, run.segments[-1].style, width=width)
        return None
    if canvas.ensure_space(placement.height):
        placement = layout_run(canvas, run, left, canvas.y, width)

    top = canvas.y
    draw_placement(canvas, placement)
    canvas.y = top + placement.height
    return placement

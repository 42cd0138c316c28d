"""Flow layout primitives for the CV document."""

from __future__ import annotations

from skripta_cv.layout.canvas import Canvas, LinkHotspot, TextFragment
from skripta_cv.layout.dates import format_date_range
from skripta_cv.layout.metrics import Measurement, TextStyle, measure_text
from skripta_cv.layout.runs import StyledRun, TextSegment, draw_run

__all__ = [
    "Canvas",
    "LinkHotspot",
    "Measurement",
    "StyledRun",
    "TextFragment",
    "TextSegment",
    "TextStyle",
    "draw_run",
    "format_date_range",
    "measure_text",
]

from __future__ import annotations

from skripta_cv.constants.layout_constants import (
    CONTACT_SEPARATOR,
    DEFAULT_SKILL_CATEGORY,
    FONT_FAMILY,
    LINE_HEIGHT_FACTOR,
)

__all__ = [
    "CONTACT_SEPARATOR",
    "DEFAULT_SKILL_CATEGORY",
    "FONT_FAMILY",
    "LINE_HEIGHT_FACTOR",
]

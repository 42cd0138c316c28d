"""Error types raised by the CV generation engine."""

from __future__ import annotations

from dataclasses import dataclass


class CvGenerationError(Exception):
    """Raised when a CV document could not be produced at all."""


class LayoutError(CvGenerationError):
    """Raised when a drawing or measuring primitive fails mid-layout."""


class SerializationError(CvGenerationError):
    """Raised when the finished pages cannot be written to a buffer."""


@dataclass(slots=True, frozen=True)
class LayoutDefect:
    """A recoverable problem that was skipped during layout.

    Attributes:
        kind: Short category, e.g. ``"invalid_geometry"`` or ``"malformed_url"``.
        message: Human-readable description of what was omitted.
    """

    kind: str
    message: str

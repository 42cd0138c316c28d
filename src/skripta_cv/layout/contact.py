"""Header contact line: centred on one line, or left-aligned and wrapped.

Centring needs the total width up front, which is only meaningful when the
whole line fits. :func:`choose_contact_layout` therefore decides between the
two modes and precomputes every position; the matching renderer only draws.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import HttpUrl, TypeAdapter, ValidationError

from skripta_cv.constants.layout_constants import (
    COLOR_BLACK,
    COLOR_LINK,
    CONTACT_SEPARATOR,
    CONTACT_WRAP_THRESHOLD,
    FONT_SIZE_CONTACT,
    PORTFOLIO_LABEL,
)
from skripta_cv.layout.metrics import TextStyle

if TYPE_CHECKING:
    from skripta_cv.layout.canvas import Canvas
    from skripta_cv.models.profile import UserProfile

logger = logging.getLogger(__name__)

__all__ = [
    "CONTACT_STYLE",
    "CenteredContactLayout",
    "ContactItem",
    "ContactLayout",
    "PlacedContact",
    "WrappedContactLayout",
    "build_contact_items",
    "choose_contact_layout",
    "normalize_url",
    "render_contact_line",
]

CONTACT_STYLE = TextStyle(size=FONT_SIZE_CONTACT)
_SCHEME = re.compile(r"^https?://", re.IGNORECASE)
_HTTP_URL = TypeAdapter(HttpUrl)


@dataclass(slots=True, frozen=True)
class ContactItem:
    text: str
    link: str | None = None


@dataclass(slots=True, frozen=True)
class PlacedContact:
    """A contact item (or separator) with its final position and size."""

    text: str
    x: float
    y: float
    width: float
    height: float
    link: str | None = None
    is_separator: bool = False


@dataclass(slots=True, frozen=True)
class CenteredContactLayout:
    """Everything fits on one line centred across the page."""

    placements: tuple[PlacedContact, ...]
    top: float
    height: float


@dataclass(slots=True, frozen=True)
class WrappedContactLayout:
    """Items flow left to right from the margin, breaking between items."""

    placements: tuple[PlacedContact, ...]
    top: float
    height: float


ContactLayout = CenteredContactLayout | WrappedContactLayout


def normalize_url(raw: str) -> str | None:
    """Prefix ``https://`` when *raw* has no scheme and validate the result.

    Returns:
        The normalized URL, or *None* if it is not a valid http(s) URL.
    """
    candidate = raw.strip()
    if not candidate:
        return None
    if not _SCHEME.match(candidate):
        candidate = f"https://{candidate}"
    try:
        _HTTP_URL.validate_python(candidate)
    except ValidationError:
        return None
    return candidate


def build_contact_items(user: UserProfile) -> list[ContactItem]:
    """Contact items in display order: location, email, phone, portfolio."""
    items: list[ContactItem] = []
    if user.location and user.location.strip():
        items.append(ContactItem(user.location.strip()))
    if user.email and user.email.strip():
        email = user.email.strip()
        items.append(ContactItem(email, f"mailto:{email}"))
    if user.phone_number and user.phone_number.strip():
        items.append(ContactItem(user.phone_number.strip()))
    if user.portfolio_link and user.portfolio_link.strip():
        url = normalize_url(user.portfolio_link)
        if url is None:
            logger.warning("Dropping malformed portfolio link %r", user.portfolio_link)
        items.append(ContactItem(PORTFOLIO_LABEL, url))
    return items


def choose_contact_layout(
    canvas: Canvas,
    items: list[ContactItem],
    top: float,
    style: TextStyle = CONTACT_STYLE,
) -> ContactLayout:
    """Decide between centred and wrapped layout and place every item.

    The joined line is probed at the content width: if it wraps (height above
    ``CONTACT_WRAP_THRESHOLD`` times the font size) or is wider than the
    content area, items are laid out left-aligned and wrapped.
    """
    available = canvas.content_width
    probe = CONTACT_SEPARATOR.join(item.text for item in items)
    measured = canvas.measure(probe, style, available)
    wraps = measured.height > style.size * CONTACT_WRAP_THRESHOLD

    if wraps or measured.width > available:
        logger.info("Contact line does not fit on one line; using left-aligned layout")
        return _wrapped_layout(canvas, items, top, style)
    return _centered_layout(canvas, items, top, measured.width, measured.height, style)


def _centered_layout(
    canvas: Canvas,
    items: list[ContactItem],
    top: float,
    full_width: float,
    height: float,
    style: TextStyle,
) -> CenteredContactLayout:
    separator_width = canvas.width_of(CONTACT_SEPARATOR, style)
    line_height = style.line_height
    x = (canvas.page_width - full_width) / 2
    placements: list[PlacedContact] = []
    for index, item in enumerate(items):
        width = canvas.width_of(item.text, style)
        placements.append(PlacedContact(item.text, x, top, width, line_height, item.link))
        x += width
        if index < len(items) - 1:
            placements.append(
                PlacedContact(CONTACT_SEPARATOR, x, top, separator_width, line_height, is_separator=True)
            )
            x += separator_width
    return CenteredContactLayout(tuple(placements), top, height)


def _wrapped_layout(
    canvas: Canvas,
    items: list[ContactItem],
    top: float,
    style: TextStyle,
) -> WrappedContactLayout:
    """Flow items from the left margin, breaking rows between items.

    An item wider than the content area gets a row of its own, is clamped
    to the content width and wraps inside it; no separator follows it.
    """
    left = canvas.margins.left
    available = canvas.content_width
    right = left + available
    separator_width = canvas.width_of(CONTACT_SEPARATOR, style)
    x = left
    row_top = top
    line_height = style.line_height
    placements: list[PlacedContact] = []
    for index, item in enumerate(items):
        is_last = index == len(items) - 1
        width = canvas.width_of(item.text, style)
        oversized = width > available
        needed = width + (0.0 if is_last else separator_width)
        if x != left and (oversized or x + needed > right):
            x = left
            row_top += line_height

        if oversized:
            height = canvas.measure(item.text, style, available).height
            placements.append(PlacedContact(item.text, left, row_top, available, height, item.link))
            row_top += height
            x = left
            continue

        placements.append(PlacedContact(item.text, x, row_top, width, line_height, item.link))
        x += width
        if not is_last:
            placements.append(
                PlacedContact(
                    CONTACT_SEPARATOR,
                    x,
                    row_top,
                    separator_width,
                    line_height,
                    is_separator=True,
                )
            )
            x += separator_width

    bottom = row_top if x == left and placements else row_top + line_height
    return WrappedContactLayout(tuple(placements), top, bottom - top if items else 0.0)


def render_contact_line(canvas: Canvas, items: list[ContactItem], style: TextStyle = CONTACT_STYLE) -> ContactLayout:
    """Lay out and draw the contact line at the cursor, then move below it."""
    layout = choose_contact_layout(canvas, items, canvas.y, style)
    match layout:
        case CenteredContactLayout():
            _draw_placements(canvas, layout, style, underline_links=False)
        case WrappedContactLayout():
            _draw_placements(canvas, layout, style, underline_links=True)
    canvas.set_style(style)
    canvas.y = layout.top + layout.height
    return layout


def _draw_placements(
    canvas: Canvas,
    layout: ContactLayout,
    style: TextStyle,
    *,
    underline_links: bool,
) -> None:
    link_style = style.with_(color=COLOR_LINK, underline=underline_links)
    plain_style = style.with_(color=COLOR_BLACK)
    for placed in layout.placements:
        if placed.link is None:
            canvas.draw_text_at(placed.text, placed.x, placed.y, plain_style, width=placed.width)
            continue
        canvas.draw_text_at(placed.text, placed.x, placed.y, link_style, width=placed.width)
        canvas.add_link(
            placed.x,
            placed.y,
            max(placed.width, 1.0),
            max(placed.height, 1.0),
            placed.link,
        )

"""Human-readable date ranges for CV headings."""

from __future__ import annotations

from datetime import date, datetime

__all__ = ["format_date_range", "format_month_year"]

_MONTH_ABBR = [
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def format_month_year(value: object) -> str | None:
    """Return ``"Mon YYYY"`` for *value*.

    Strings are parsed as ISO dates; a string that does not parse is returned
    unchanged. Empty, blank and non-date values give *None*.
    """
    if not value:
        return None
    if isinstance(value, date):
        return f"{_MONTH_ABBR[value.month]} {value.year:04d}"
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return value
        return f"{_MONTH_ABBR[parsed.month]} {parsed.year:04d}"
    return None


def format_date_range(start: object, end: object, ongoing_label: str = "Present") -> str:
    """Return a range like ``Jan 2020 - Jun 2021``.

    A missing end date becomes *ongoing_label*. A missing start date yields the
    end side alone, with no "until" wording added.
    """
    if not start and not end:
        return ""
    start_text = format_month_year(start)
    end_text = format_month_year(end) if end else ongoing_label
    if not start_text:
        return end_text or ""
    if not end_text:
        return start_text
    return f"{start_text} - {end_text}"

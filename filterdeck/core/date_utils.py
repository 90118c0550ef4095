"""Date parsing, formatting and calendar grid utilities."""

from __future__ import annotations

import calendar
import re
from datetime import date, timedelta
from enum import Enum

import pandas as pd

from filterdeck.core.config import CALENDAR_CELLS, DISPLAY_DATE_FORMAT, ISO_DATE_FORMAT
from filterdeck.core.models import CalendarDay


class DateFormat(Enum):
    """Date formats exchanged by the filter panel."""

    ISO = ISO_DATE_FORMAT
    MONTH_FIRST = DISPLAY_DATE_FORMAT


WEEKDAY_HEADERS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

_MONTH_FIRST_SHAPE = re.compile(r"^\d+/\d+/\d{4}$")
_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def detect_date_format(text: str) -> DateFormat | None:
    """Detect which supported format a piece of text is written in.

    Only the shape is checked; ``02/31/2024`` is MONTH_FIRST even though no
    such day exists.

    Args:
        text: Raw input text.

    Returns:
        The matching DateFormat, or None when the text has neither shape.
    """
    text = text.strip()
    if _MONTH_FIRST_SHAPE.match(text):
        return DateFormat.MONTH_FIRST
    if _ISO_PREFIX.match(text):
        return DateFormat.ISO
    return None


def _parse_month_first(text: str) -> date | None:
    """Strict MM/DD/YYYY parse that refuses calendar overflow."""
    month_str, day_str, year_str = text.split("/")
    try:
        # date() rejects 02/31 and friends instead of rolling them over
        return date(int(year_str), int(month_str), int(day_str))
    except ValueError:
        return None


def _parse_iso(text: str) -> date | None:
    """General calendar-date parse for ISO ``YYYY-MM-DD`` text."""
    parsed = pd.to_datetime(text, format="ISO8601", errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()


_PARSERS = {
    DateFormat.MONTH_FIRST: _parse_month_first,
    DateFormat.ISO: _parse_iso,
}


def parse_date_input(text: str | None) -> date | None:
    """Resolve free-text date input.

    The text's format is detected first and the matching parser decides
    whether the date exists. Partial or invalid input never raises; it
    simply resolves to None so the caller can keep the raw text while the
    user is still typing.

    Args:
        text: Text typed by the user or stored in the filter buffer.

    Returns:
        The resolved date, or None.
    """
    if not text:
        return None
    text = text.strip()

    date_format = detect_date_format(text)
    if date_format is None:
        return None
    return _PARSERS[date_format](text)


def format_display_date(value: date) -> str:
    """Format a date as zero-padded ``MM/DD/YYYY``."""
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def to_iso(value: date) -> str:
    """Format a date as ISO ``YYYY-MM-DD``, the value exchanged with callers."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def display_text_for_value(value: str | None) -> str:
    """Text shown in a date input for a stored field value.

    Resolvable values are shown as MM/DD/YYYY; anything else is echoed
    back verbatim so partial input survives a refresh.
    """
    if not value or not value.strip():
        return ""
    parsed = parse_date_input(value)
    if parsed is None:
        return value
    return format_display_date(parsed)


def first_of_month(value: date) -> date:
    """First day of the month containing ``value``."""
    return value.replace(day=1)


def shift_month(anchor: date, delta: int) -> date:
    """Move a month anchor by ``delta`` calendar months.

    Only year and month of the anchor are used; the result is always the
    first day of the target month.
    """
    month_index = anchor.year * 12 + (anchor.month - 1) + delta
    year, month = divmod(month_index, 12)
    return date(year, month + 1, 1)


def month_title(anchor: date) -> str:
    """Header text for the month containing ``anchor``, e.g. ``June 2024``."""
    return f"{calendar.month_name[anchor.month]} {anchor.year}"


def week_start(value: date) -> date:
    """Most recent Sunday on or before ``value``."""
    # date.weekday(): Monday=0 ... Sunday=6
    return value - timedelta(days=(value.weekday() + 1) % 7)


def generate_calendar_grid(
    anchor: date,
    selected: date | None = None,
    today: date | None = None,
) -> list[CalendarDay]:
    """Build the six-week grid shown for the anchor's month.

    The grid starts on the Sunday on or before the first of the month and
    always holds exactly 42 consecutive days.

    Args:
        anchor: Any date inside the month to display.
        selected: Currently committed date, if any.
        today: Current date; defaults to the real current date.

    Returns:
        42 CalendarDay entries in chronological order.
    """
    if today is None:
        today = date.today()

    first = first_of_month(anchor)
    start = week_start(first)

    days: list[CalendarDay] = []
    for offset in range(CALENDAR_CELLS):
        current = start + timedelta(days=offset)
        days.append(
            CalendarDay(
                date=current,
                is_current_month=(
                    current.month == first.month and current.year == first.year
                ),
                is_today=current == today,
                is_selected=selected is not None and current == selected,
            )
        )
    return days

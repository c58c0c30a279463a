"""Date helpers shared by the client, service and CLI.

All display formatting goes through here so there is a single canonical
pattern ("25 December 2025") instead of per-view variants.
"""

from datetime import date, datetime

from roster.exceptions import ValidationError

API_DATE_FORMAT = "%Y-%m-%d"


def format_api_date(value: date) -> str:
    """Serialize a date as YYYY-MM-DD for the REST API."""
    return value.strftime(API_DATE_FORMAT)


def parse_api_date(value: str) -> date:
    """Parse a YYYY-MM-DD string.

    Raises:
        ValidationError: If value is not a valid YYYY-MM-DD date.
    """
    try:
        return datetime.strptime(value, API_DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date format: {value!r} (expected YYYY-MM-DD)")


def parse_month(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM string into a (year, month) pair."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid month: {value!r} (expected YYYY-MM)")
    return parsed.year, parsed.month


def format_display_date(value: date) -> str:
    """Canonical display format, e.g. "25 December 2025"."""
    return f"{value.day} {value.strftime('%B %Y')}"


def format_month_label(year: int, month: int) -> str:
    """Month heading, e.g. "March 2025"."""
    return date(year, month, 1).strftime("%B %Y")


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, crossing year boundaries."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def default_month(today: date | None = None) -> date:
    """First day of the month members should be looking at.

    After the 15th this is next month, otherwise the current month.
    """
    today = today or date.today()
    if today.day > 15:
        year, month = shift_month(today.year, today.month, 1)
        return date(year, month, 1)
    return today.replace(day=1)


def day_suffix(day: int) -> str:
    """Ordinal suffix for a day of month (st, nd, rd, th)."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")

"""Pure formatting functions for display output."""

from datetime import date

from roster.dates import format_display_date


def format_date(value: date | None) -> str:
    """Format a date in the canonical display form, or "-" if missing."""
    if value is None:
        return "-"
    return format_display_date(value)


def format_color(color: str) -> str:
    """Rich markup showing a colour swatch followed by its hex code."""
    return f"[{color}]■[/] {color.upper()}"


def format_optional(value: str | None) -> str:
    return value if value else "[dim]-[/dim]"

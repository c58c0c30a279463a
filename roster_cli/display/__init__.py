"""Display module for rendering roster output.

This module provides:
- console: Shared Rich console instance
- TableRenderer: Settings, special day and member tables
- NotificationRenderer: Success/error lines for workflow notifications
- Formatting functions for dates and colours
"""

from roster_cli.display.console import console
from roster_cli.display.formatters import (
    format_color,
    format_date,
    format_optional,
)
from roster_cli.display.notification_renderer import NotificationRenderer
from roster_cli.display.table_renderer import TableRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "NotificationRenderer",
    "TableRenderer",
    # Formatters
    "format_color",
    "format_date",
    "format_optional",
]

"""Table renderer for settings, special days and members."""

from rich.table import Table

from roster.models.settings import Settings
from roster.models.special_day import SpecialDay
from roster.models.user import User
from roster_cli.display.console import console
from roster_cli.display.formatters import format_color, format_date, format_optional


def _table() -> Table:
    return Table(show_header=True, header_style="bold", box=None, padding=(0, 2))


class TableRenderer:
    """Render tables for roster records.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_empty(self, message: str) -> None:
        console.print(f"[dim]{message}[/dim]")

    def render_settings(self, settings: Settings, reminder: str) -> None:
        """Render organization settings as a setting/value table.

        Args:
            settings: Current settings.
            reminder: Sentence describing the availability deadline.
        """
        table = _table()
        table.add_column("SETTING", style="cyan", no_wrap=True)
        table.add_column("VALUE")
        table.add_row("name_format", settings.name_format.value)
        table.add_row("deadline_day", str(settings.deadline_day))

        console.print(table)
        console.print()
        console.print(f"[dim]{reminder}[/dim]")

    def render_special_days(self, special_days: list[SpecialDay], heading: str) -> None:
        """Render special days as a table.

        Args:
            special_days: Records to display, already ordered by date.
            heading: Line printed above the table.
        """
        console.print(heading)
        console.print()

        table = _table()
        table.add_column("ID", style="dim", justify="right")
        table.add_column("DATE", no_wrap=True)
        table.add_column("NAME", style="cyan")
        table.add_column("DESCRIPTION")
        table.add_column("COLOR", no_wrap=True)

        for day in special_days:
            table.add_row(
                str(day.id),
                format_date(day.date),
                day.name,
                format_optional(day.description),
                format_color(day.color),
            )

        console.print(table)

    def render_members(self, members: list[tuple[User, str]]) -> None:
        table = _table()
        table.add_column("ID", style="dim", justify="right")
        table.add_column("NAME", style="cyan")
        table.add_column("INITIALS")
        table.add_column("ROLE", style="dim")

        for user, display_name in members:
            table.add_row(
                str(user.id),
                display_name,
                format_optional(user.initials),
                "admin" if user.is_admin else "member",
            )

        console.print(table)

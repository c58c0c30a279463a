"""Show and update organization settings."""

import typer
from typing_extensions import Annotated

from roster.models.settings import DEADLINE_DAY_MAX, DEADLINE_DAY_MIN
from roster_cli.context import get_context
from roster_cli.display import TableRenderer, console
from roster_cli.utils import finish_mutation, require_data, show_notifications

settings_app = typer.Typer(help="Show and update organization settings.")


@settings_app.command("show")
def show() -> None:
    """Show the current name format and availability deadline."""
    workflow = get_context().settings
    settings = require_data(workflow.read_settings(), "settings")
    TableRenderer().render_settings(settings, workflow.deadline_reminder())


@settings_app.command("name-format")
def name_format(
    fmt: Annotated[
        str,
        typer.Argument(help="Name format: full, first, last or initials"),
    ],
) -> None:
    """Set how member names are displayed."""
    finish_mutation(get_context().settings.update_name_format(fmt))


@settings_app.command("deadline")
def deadline(
    day: Annotated[
        int,
        typer.Argument(
            help=f"Day of month ({DEADLINE_DAY_MIN}-{DEADLINE_DAY_MAX}) availability is due"
        ),
    ],
) -> None:
    """Set the monthly availability deadline."""
    workflow = get_context().settings
    require_data(workflow.read_settings(), "settings")

    scheduled = workflow.move_deadline_slider(day)
    if scheduled:
        # One-shot command: commit now rather than waiting out the debounce delay
        workflow.flush_pending()

    if show_notifications():
        raise typer.Exit(1)
    if not scheduled:
        console.print(f"Deadline day is already {day}")

"""List, add, edit, delete and export special days."""

import logging
from pathlib import Path
from typing import Any

import typer
from typing_extensions import Annotated

from roster.dates import format_display_date, format_month_label, parse_month
from roster.exceptions import RosterError
from roster.models.special_day import SpecialDay, ViewMode
from roster.output import get_writer
from roster.workflows.special_days import SpecialDaysWorkflow
from roster_cli.context import get_context
from roster_cli.display import TableRenderer, console
from roster_cli.utils import finish_mutation, require_data

logger = logging.getLogger(__name__)

special_days_app = typer.Typer(help="Manage special days on the roster calendar.")

MonthOption = Annotated[
    str | None,
    typer.Option("--month", "-m", help="Only show days in this month (YYYY-MM)"),
]


def _parse_month_or_exit(value: str) -> tuple[int, int]:
    try:
        return parse_month(value)
    except RosterError as e:
        logger.error(str(e))
        raise typer.Exit(1)


def _visible_days(workflow: SpecialDaysWorkflow, month: str | None) -> list[SpecialDay]:
    """Fetch the full list, then filter to month when one is given."""
    require_data(workflow.list_special_days(), "special days")
    if month is None:
        workflow.set_view_mode(ViewMode.ALL)
    else:
        workflow.select_month(*_parse_month_or_exit(month))
        workflow.set_view_mode(ViewMode.MONTH)
    return workflow.visible_special_days()


@special_days_app.command("ls")
def ls(month: MonthOption = None) -> None:
    """List special days, optionally filtered to one month."""
    workflow = get_context().special_days
    days = _visible_days(workflow, month)

    renderer = TableRenderer()
    if not days:
        renderer.render_empty(workflow.empty_message())
        return

    if workflow.view_mode == ViewMode.MONTH:
        heading = f"Special days in {format_month_label(*workflow.selected_month)}:"
    else:
        heading = f"All special days ({len(days)}):"
    renderer.render_special_days(days, heading)


@special_days_app.command("month")
def month(
    value: Annotated[str, typer.Argument(metavar="YYYY-MM", help="Month to query")],
) -> None:
    """Query special days for one month from the server."""
    year, month_num = _parse_month_or_exit(value)
    days = require_data(
        get_context().special_days.special_days_for_month(year, month_num),
        f"special days for {value}",
    )

    renderer = TableRenderer()
    label = format_month_label(year, month_num)
    if not days:
        renderer.render_empty(f"No special days marked for {label}")
        return
    renderer.render_special_days(days, f"Special days in {label}:")


@special_days_app.command("add")
def add(
    date: Annotated[str, typer.Argument(help="Date (YYYY-MM-DD)")],
    name: Annotated[str, typer.Argument(help="Name shown on the calendar")],
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="Optional description")
    ] = None,
    color: Annotated[
        str | None, typer.Option("--color", "-c", help="Hex colour, e.g. #FF0000")
    ] = None,
) -> None:
    """Mark a date as a special day."""
    fields: dict[str, Any] = {"date": date, "name": name, "description": description}
    if color is not None:
        fields["color"] = color
    finish_mutation(get_context().special_days.create_special_day(fields))


@special_days_app.command("edit")
def edit(
    special_day_id: Annotated[int, typer.Argument(metavar="ID", help="Special day id")],
    date: Annotated[str | None, typer.Option("--date", help="New date (YYYY-MM-DD)")] = None,
    name: Annotated[str | None, typer.Option("--name", help="New name")] = None,
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="New description")
    ] = None,
    color: Annotated[str | None, typer.Option("--color", "-c", help="New hex colour")] = None,
) -> None:
    """Change fields of an existing special day."""
    changes = {
        key: value
        for key, value in {
            "date": date,
            "name": name,
            "description": description,
            "color": color,
        }.items()
        if value is not None
    }
    finish_mutation(get_context().special_days.update_special_day(special_day_id, changes))


@special_days_app.command("rm")
def rm(
    special_day_id: Annotated[int, typer.Argument(metavar="ID", help="Special day id")],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete a special day."""
    workflow = get_context().special_days

    if not force:
        days = workflow.list_special_days().data or []
        match = next((day for day in days if day.id == special_day_id), None)
        if match is not None:
            console.print(
                f"\nDelete special day '{match.name}' ({format_display_date(match.date)})"
            )
        else:
            console.print(f"\nDelete special day {special_day_id}")
        if not typer.confirm("Continue?"):
            typer.echo("Delete cancelled.")
            return

    finish_mutation(workflow.delete_special_day(special_day_id))


@special_days_app.command("export")
def export(
    path: Annotated[Path, typer.Argument(help="Output file path")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: ics or json")
    ] = "ics",
    month: MonthOption = None,
) -> None:
    """Export special days to an ICS or JSON file."""
    try:
        writer = get_writer(format)
    except RosterError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    days = _visible_days(get_context().special_days, month)

    if not path.suffix:
        path = path.with_suffix(f".{writer.get_extension()}")
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        writer.write(days, path)
    except RosterError as e:
        logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    console.print(
        "[bold green]✓[/bold green] "
        f"Exported {len(days)} special days to {path}"
    )

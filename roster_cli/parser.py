"""Typer application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from roster_cli import setup_logging
from roster_cli.commands import (
    config,
    members_app,
    serve,
    settings_app,
    special_days_app,
)
from roster_cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Manage roster settings, special days and members.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show info messages")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Roster sync command line."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.add_typer(settings_app, name="settings")
app.add_typer(special_days_app, name="special-days")
app.add_typer(members_app, name="members")
app.command("config")(config)
app.command("serve")(serve)

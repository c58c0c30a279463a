"""CLI helpers for turning workflow results into output and exit codes."""

import logging
from typing import Any

import typer

from roster.client.results import MutationResult, QueryResult
from roster_cli.context import get_context
from roster_cli.display.notification_renderer import NotificationRenderer

logger = logging.getLogger(__name__)


def require_data(result: QueryResult, what: str) -> Any:
    """Return query data, or exit with status 1 if the query failed."""
    if result.is_error:
        logger.error(f"Failed to load {what}: {result.error}")
        raise typer.Exit(1)
    return result.data


def show_notifications() -> int:
    """Print and dismiss pending notifications. Returns the error count."""
    ctx = get_context()
    return NotificationRenderer(ctx.notifier, quiet=ctx.quiet).flush()


def finish_mutation(result: MutationResult) -> None:
    """Report a mutation's notifications and exit 1 if it failed."""
    show_notifications()
    if not result.ok:
        raise typer.Exit(1)

"""Run the roster service with Flask's development server."""

import logging

import typer
from typing_extensions import Annotated

from roster.server import create_app
from roster_cli.context import get_context

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[
        str | None, typer.Option("--host", help="Interface to bind (default: ROSTER_HOST)")
    ] = None,
    port: Annotated[
        int | None, typer.Option("--port", "-p", help="Port to listen on (default: ROSTER_PORT)")
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Enable Flask debug mode")] = False,
) -> None:
    """Run the development server."""
    config = get_context().config
    app = create_app(config)

    host = host or config.server_host
    port = port or config.server_port
    logger.info(f"Serving roster API on http://{host}:{port} (store: {config.store_path})")
    app.run(host=host, port=port, debug=debug)

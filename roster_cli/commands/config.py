"""Display configuration file path and settings."""

import os
from pathlib import Path

from rich.table import Table

from roster.config import RosterConfig
from roster_cli.display import console


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()
    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()
    return None


def _get_source(env_key: str) -> str:
    return "env" if env_key in os.environ else "default"


def _create_table(setting_width: int, source_width: int) -> Table:
    """Create a styled table for config sections with fixed column widths."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
    table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
    table.add_column("VALUE")
    return table


def config_sections(cfg: RosterConfig) -> list[tuple[str, list[tuple[str, str, str]]]]:
    """Group effective settings as (section, [(setting, value, source)])."""
    cookie_display = "[dim]set[/dim]" if cfg.session_cookie else "[dim]None[/dim]"
    return [
        (
            "API Client",
            [
                ("api_base_url", cfg.api_base_url, _get_source("ROSTER_API_URL")),
                ("session_cookie", cookie_display, _get_source("ROSTER_SESSION_COOKIE")),
                (
                    "session_cookie_name",
                    cfg.session_cookie_name,
                    _get_source("ROSTER_SESSION_COOKIE_NAME"),
                ),
                (
                    "request_timeout",
                    f"{cfg.request_timeout:g}s",
                    _get_source("ROSTER_REQUEST_TIMEOUT"),
                ),
                (
                    "deadline_debounce_ms",
                    str(cfg.deadline_debounce_ms),
                    _get_source("ROSTER_DEADLINE_DEBOUNCE_MS"),
                ),
            ],
        ),
        (
            "Storage Paths",
            [
                ("data_dir", str(cfg.data_dir.resolve()), _get_source("ROSTER_DATA_DIR")),
                ("store_filename", cfg.store_filename, _get_source("ROSTER_STORE_FILENAME")),
                ("log_dir", str(cfg.log_dir.resolve()), _get_source("LOG_DIR")),
                ("log_filename", cfg.log_filename, _get_source("LOG_FILENAME")),
            ],
        ),
        (
            "Server",
            [
                ("server_host", cfg.server_host, _get_source("ROSTER_HOST")),
                ("server_port", str(cfg.server_port), _get_source("ROSTER_PORT")),
            ],
        ),
    ]


def config() -> None:
    """Display configuration file path and settings."""
    env_file = _find_env_file()
    sections = config_sections(RosterConfig.from_env())

    # Calculate max widths across all sections
    all_rows = [row for _, rows in sections for row in rows]
    setting_width = max(max(len(row[0]) for row in all_rows), len("SETTING"))
    source_width = max(max(len(row[2]) for row in all_rows), len("SOURCE"))

    console.print()
    console.print("━" * 50)
    console.print("[bold]  Configuration[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Config File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    for section_name, rows in sections:
        console.print(f"\n[bold]{section_name}:[/bold]")
        table = _create_table(setting_width, source_width)
        for setting, value, source in rows:
            table.add_row(setting, source, value)
        console.print(table)

    console.print()

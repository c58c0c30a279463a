"""CLI commands package."""

from roster_cli.commands.config import config
from roster_cli.commands.members import members_app
from roster_cli.commands.serve import serve
from roster_cli.commands.settings import settings_app
from roster_cli.commands.special_days import special_days_app

__all__ = [
    "config",
    "members_app",
    "serve",
    "settings_app",
    "special_days_app",
]

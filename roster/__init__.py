"""Roster sync: settings and special days for a church roster."""

from roster.server import create_app

__all__ = ["create_app"]

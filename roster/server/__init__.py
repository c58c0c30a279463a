"""Flask service holding settings, special days and members."""

from flask import Flask

from roster.config import RosterConfig
from roster.server.auth import UserLoader, session_user_loader
from roster.server.routes import api
from roster.server.store import RosterStore


def create_app(
    config: RosterConfig | None = None,
    store: RosterStore | None = None,
    user_loader: UserLoader | None = None,
) -> Flask:
    """
    Create the roster service.

    Args:
        config: Roster configuration (defaults to environment)
        store: Backing store; defaults to a JSON-backed store at config.store_path
        user_loader: Callable returning the current User or None; defaults to
            reading ``user_id`` from the signed session

    Returns:
        Configured Flask app
    """
    config = config or RosterConfig.from_env()
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.secret_key

    app.extensions["roster_store"] = store or RosterStore(config.store_path)
    app.extensions["roster_user_loader"] = user_loader or session_user_loader
    app.register_blueprint(api)

    return app


__all__ = ["RosterStore", "create_app"]

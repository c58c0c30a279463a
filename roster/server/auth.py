"""Request identity and access checks.

Authentication itself belongs to an external provider, which signs the
Flask session (shared secret key) with the member's ``user_id``. This module
only resolves that identity and gates routes on it.
"""

import logging
from functools import wraps
from typing import Callable, Optional

from flask import current_app, jsonify, session

from roster.exceptions import UserNotFoundError
from roster.models.user import User

logger = logging.getLogger(__name__)

UserLoader = Callable[[], Optional[User]]


def session_user_loader() -> Optional[User]:
    """Resolve the current member from the signed session cookie."""
    user_id = session.get("user_id")
    if user_id is None:
        return None
    try:
        return current_app.extensions["roster_store"].get_user(int(user_id))
    except (UserNotFoundError, TypeError, ValueError):
        logger.debug(f"Session refers to unknown user {user_id!r}")
        return None


def current_user() -> Optional[User]:
    return current_app.extensions["roster_user_loader"]()


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_user() is None:
            return jsonify({"message": "Not authenticated"}), 401
        return f(*args, **kwargs)

    return decorated_function


def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user = current_user()
        if user is None:
            return jsonify({"message": "Not authenticated"}), 401
        if not user.is_admin:
            return jsonify({"message": "Admin access required"}), 403
        return f(*args, **kwargs)

    return decorated_function

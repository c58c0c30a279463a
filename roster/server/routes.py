"""REST routes for settings, special days and members."""

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from roster.exceptions import (
    InitialsTakenError,
    SpecialDayNotFoundError,
    UserNotFoundError,
)
from roster.models.settings import NameFormat, SettingsUpdate
from roster.models.special_day import SpecialDayCreate, SpecialDayUpdate
from roster.models.user import MemberCreate, MemberInitialsUpdate, MemberNameUpdate
from roster.models.validation import describe_validation_error
from roster.server.auth import admin_required, login_required
from roster.server.store import RosterStore

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


def _store() -> RosterStore:
    return current_app.extensions["roster_store"]


def _error(message: str, status: int):
    return jsonify({"message": message}), status


def _json_body() -> dict | None:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


# ----------------------------------------------------------------------
# Special days
# ----------------------------------------------------------------------


@api.route("/special-days", methods=["GET"])
@login_required
def list_special_days():
    try:
        days = _store().list_special_days()
    except Exception:
        logger.exception("Failed to fetch special days")
        return _error("Failed to fetch special days", 500)
    return jsonify([day.to_wire() for day in days])


@api.route("/special-days/month/<int:year>/<int:month>", methods=["GET"])
@login_required
def list_special_days_by_month(year: int, month: int):
    if not 1 <= month <= 12:
        return _error("Month must be between 1 and 12", 400)
    try:
        days = _store().special_days_by_month(year, month)
    except Exception:
        logger.exception(f"Failed to fetch special days for {year}-{month:02d}")
        return _error("Failed to fetch special days", 500)
    return jsonify([day.to_wire() for day in days])


@api.route("/admin/special-days", methods=["POST"])
@admin_required
def create_special_day():
    body = _json_body()
    if body is None:
        return _error("Invalid request body", 400)
    try:
        fields = SpecialDayCreate.model_validate(body)
    except PydanticValidationError as e:
        return _error(describe_validation_error(e), 400)

    try:
        special_day = _store().create_special_day(fields)
    except Exception:
        logger.exception("Failed to create special day")
        return _error("Failed to create special day", 500)
    return jsonify(special_day.to_wire()), 201


@api.route("/admin/special-days/<int:special_day_id>", methods=["PATCH"])
@admin_required
def update_special_day(special_day_id: int):
    body = _json_body()
    if body is None:
        return _error("Invalid request body", 400)
    try:
        changes = SpecialDayUpdate.model_validate(body)
        special_day = _store().update_special_day(special_day_id, changes)
    except PydanticValidationError as e:
        return _error(describe_validation_error(e), 400)
    except SpecialDayNotFoundError:
        return _error("Special day not found", 404)
    except Exception:
        logger.exception(f"Failed to update special day {special_day_id}")
        return _error("Failed to update special day", 500)
    return jsonify(special_day.to_wire())


@api.route("/admin/special-days/<int:special_day_id>", methods=["DELETE"])
@admin_required
def delete_special_day(special_day_id: int):
    try:
        _store().delete_special_day(special_day_id)
    except SpecialDayNotFoundError:
        return _error("Special day not found", 404)
    except Exception:
        logger.exception(f"Failed to delete special day {special_day_id}")
        return _error("Failed to delete special day", 500)
    return "", 204


# ----------------------------------------------------------------------
# Settings
# ----------------------------------------------------------------------


@api.route("/admin/settings", methods=["GET"])
@admin_required
def get_settings():
    try:
        settings = _store().get_settings()
    except Exception:
        logger.exception("Failed to fetch settings")
        return _error("Failed to fetch settings", 500)
    return jsonify(settings.model_dump(mode="json", by_alias=True))


@api.route("/admin/settings", methods=["PUT"])
@admin_required
def update_settings():
    body = _json_body()
    if body is None:
        return _error("Invalid request body", 400)
    try:
        changes = SettingsUpdate.model_validate(body)
    except PydanticValidationError as e:
        return _error(describe_validation_error(e, with_fields=False), 400)

    try:
        settings = _store().update_settings(changes)
    except Exception:
        logger.exception("Failed to update settings")
        return _error("Failed to update settings", 500)
    return jsonify(settings.model_dump(mode="json", by_alias=True))


@api.route("/admin/name-format", methods=["GET"])
@admin_required
def get_name_format():
    return jsonify({"format": _store().get_name_format().value})


@api.route("/admin/name-format", methods=["PUT"])
@admin_required
def update_name_format():
    body = _json_body()
    try:
        name_format = NameFormat.parse((body or {}).get("format"))
    except ValueError:
        return _error("Invalid name format", 400)

    try:
        name_format = _store().set_name_format(name_format)
    except Exception:
        logger.exception("Failed to update name format")
        return _error("Failed to update name format", 500)
    return jsonify({"format": name_format.value})


# ----------------------------------------------------------------------
# Members
# ----------------------------------------------------------------------


@api.route("/users", methods=["GET"])
def list_users():
    try:
        store = _store()
        name_format = store.get_name_format()
        users = store.list_users()
    except Exception:
        logger.exception("Failed to fetch users")
        return _error("Failed to fetch users", 500)
    return jsonify(
        [
            user.model_dump(mode="json", by_alias=True)
            | {"displayName": user.display_name(name_format)}
            for user in users
        ]
    )


@api.route("/admin/members", methods=["POST"])
@admin_required
def create_member():
    body = _json_body()
    if body is None:
        return _error("Invalid request body", 400)
    try:
        fields = MemberCreate.model_validate(body)
    except PydanticValidationError as e:
        return _error(describe_validation_error(e, with_fields=False), 400)

    try:
        user = _store().create_user(fields.first_name, fields.last_name)
    except Exception:
        logger.exception("Failed to create member")
        return _error("Failed to create member", 500)
    return jsonify(user.model_dump(mode="json", by_alias=True)), 201


@api.route("/admin/members/<int:user_id>/name", methods=["PUT"])
@admin_required
def update_member_name(user_id: int):
    body = _json_body()
    if body is None:
        return _error("Invalid request body", 400)
    try:
        fields = MemberNameUpdate.model_validate(body)
        user = _store().update_user_name(user_id, fields.first_name, fields.last_name)
    except PydanticValidationError as e:
        return _error(describe_validation_error(e, with_fields=False), 400)
    except UserNotFoundError:
        return _error("Member not found", 404)
    except Exception:
        logger.exception(f"Failed to update name for user {user_id}")
        return _error("Failed to update member name", 500)
    return jsonify(user.model_dump(mode="json", by_alias=True))


@api.route("/admin/members/<int:user_id>/initials", methods=["PUT"])
@admin_required
def update_member_initials(user_id: int):
    body = _json_body()
    if body is None:
        return _error("Invalid request body", 400)
    try:
        fields = MemberInitialsUpdate.model_validate(body)
        user = _store().update_user_initials(user_id, fields.initials)
    except PydanticValidationError as e:
        return _error(describe_validation_error(e, with_fields=False), 400)
    except InitialsTakenError as e:
        return _error(str(e), 400)
    except UserNotFoundError:
        return _error("Member not found", 404)
    except Exception:
        logger.exception(f"Failed to update initials for user {user_id}")
        return _error("Failed to update member initials", 500)
    return jsonify(user.model_dump(mode="json", by_alias=True))

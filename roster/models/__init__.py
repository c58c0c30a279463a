"""Pydantic models for roster sync."""

from roster.models.settings import (
    DEADLINE_DAY_MAX,
    DEADLINE_DAY_MIN,
    NameFormat,
    Settings,
    SettingsUpdate,
    validate_deadline_day,
)
from roster.models.special_day import (
    DEFAULT_COLOR,
    SpecialDay,
    SpecialDayCreate,
    SpecialDayUpdate,
    ViewMode,
)
from roster.models.user import (
    MemberCreate,
    MemberInitialsUpdate,
    MemberNameUpdate,
    User,
    format_user_name,
    generate_initials,
)

__all__ = [
    "DEADLINE_DAY_MAX",
    "DEADLINE_DAY_MIN",
    "DEFAULT_COLOR",
    "MemberCreate",
    "MemberInitialsUpdate",
    "MemberNameUpdate",
    "NameFormat",
    "Settings",
    "SettingsUpdate",
    "SpecialDay",
    "SpecialDayCreate",
    "SpecialDayUpdate",
    "User",
    "ViewMode",
    "format_user_name",
    "generate_initials",
    "validate_deadline_day",
]

"""Member model and name display formatting."""

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from roster.models.settings import NameFormat


class User(BaseModel):
    """A roster member as returned by the service (PIN never included)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    first_name: str
    last_name: str
    initials: Optional[str] = None
    is_admin: bool = False

    def display_name(self, name_format: NameFormat | str = NameFormat.FULL) -> str:
        """Format this user's name according to name_format."""
        return format_user_name(self, name_format)


INITIALS_MAX_LENGTH = 5


def _check_required(v, label):
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"{label} is required")
    return v.strip()


class MemberCreate(BaseModel):
    """Fields for a new member; initials are generated by the store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str

    @field_validator("first_name", mode="before")
    @classmethod
    def check_first_name(cls, v):
        return _check_required(v, "First name")

    @field_validator("last_name", mode="before")
    @classmethod
    def check_last_name(cls, v):
        return _check_required(v, "Last name")


class MemberNameUpdate(MemberCreate):
    """Replacement first and last name for an existing member."""


class MemberInitialsUpdate(BaseModel):
    """Custom initials for an existing member."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    initials: str

    @field_validator("initials", mode="before")
    @classmethod
    def check_initials(cls, v):
        v = _check_required(v, "Initials")
        if len(v) > INITIALS_MAX_LENGTH:
            raise ValueError(
                f"Initials should be at most {INITIALS_MAX_LENGTH} characters"
            )
        return v


def generate_initials(first_name: str, last_name: str) -> str:
    """First letter of first and last name, upper-cased."""
    return (first_name[:1] + last_name[:1]).upper()


def unique_initials(first_name: str, last_name: str, taken: Iterable[str]) -> str:
    """Generate initials, adding a numeric suffix (CM2, CM3, ...) on collision."""
    taken = set(taken)
    base = generate_initials(first_name, last_name)
    if base not in taken:
        return base

    counter = 2
    while f"{base}{counter}" in taken:
        counter += 1
    return f"{base}{counter}"


def format_user_name(user: User, name_format: NameFormat | str) -> str:
    """Render a user's name under one of the four name formats.

    Unknown formats fall back to the full name.
    """
    try:
        fmt = NameFormat.parse(name_format)
    except ValueError:
        fmt = NameFormat.FULL

    if fmt == NameFormat.FIRST:
        return user.first_name
    if fmt == NameFormat.LAST:
        return user.last_name
    if fmt == NameFormat.INITIALS:
        return user.initials or generate_initials(user.first_name, user.last_name)
    return f"{user.first_name} {user.last_name}"

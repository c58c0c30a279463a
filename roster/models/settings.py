"""Organization settings model with Pydantic v2 validation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEADLINE_DAY_MIN = 1
DEADLINE_DAY_MAX = 28
DEFAULT_DEADLINE_DAY = 20


class NameFormat(str, Enum):
    """How a person's name is displayed across the app."""

    FULL = "full"
    FIRST = "first"
    LAST = "last"
    INITIALS = "initials"

    @classmethod
    def parse(cls, value: "NameFormat | str") -> "NameFormat":
        """Look up a NameFormat by exact value, raising ValueError if unknown.

        Matching is case sensitive and surrounding whitespace is not stripped.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"Invalid name format: {value!r}")


def validate_deadline_day(value) -> int:
    """Return value if it is an integer day in [1, 28], else raise ValueError."""
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Deadline day must be an integer, got {value!r}")
    if not DEADLINE_DAY_MIN <= value <= DEADLINE_DAY_MAX:
        raise ValueError(
            f"Deadline day must be between {DEADLINE_DAY_MIN} and {DEADLINE_DAY_MAX}"
        )
    return value


class Settings(BaseModel):
    """Organization-wide settings singleton.

    Serialized with camelCase keys (``nameFormat``, ``deadlineDay``) to match
    the REST payloads.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name_format: NameFormat = NameFormat.FULL
    deadline_day: int = DEFAULT_DEADLINE_DAY

    @field_validator("deadline_day", mode="before")
    @classmethod
    def check_deadline_day(cls, v):
        return validate_deadline_day(v)


class SettingsUpdate(BaseModel):
    """Partial settings update; unset fields are left unchanged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name_format: NameFormat | None = None
    deadline_day: int | None = Field(default=None)

    @field_validator("deadline_day", mode="before")
    @classmethod
    def check_deadline_day(cls, v):
        if v is None:
            return v
        return validate_deadline_day(v)

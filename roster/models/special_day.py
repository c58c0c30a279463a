"""Special day model with Pydantic v2 validation."""

import datetime as dt
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_COLOR = "#FFD700"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


class ViewMode(str, Enum):
    """Special days list view mode."""

    ALL = "all"
    MONTH = "month"


def _check_name(v):
    if v is None:
        return v
    if not isinstance(v, str) or not v.strip():
        raise ValueError("Name is required")
    return v.strip()


def _check_color(v):
    if v is None:
        return v
    if not isinstance(v, str) or not _HEX_COLOR.match(v):
        raise ValueError(f"Invalid color: {v!r} (expected #RGB or #RRGGBB)")
    return v


class SpecialDayCreate(BaseModel):
    """Fields for a new special day (everything but the id)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: dt.date
    name: str
    description: Optional[str] = None
    color: str = DEFAULT_COLOR

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        if v is None:
            raise ValueError("Name is required")
        return _check_name(v)

    @field_validator("color", mode="before")
    @classmethod
    def check_color(cls, v):
        return _check_color(v)


class SpecialDayUpdate(BaseModel):
    """Partial special day update.

    Only fields that were explicitly set are sent or applied, so
    ``model_dump(exclude_unset=True)`` is the patch body.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: Optional[dt.date] = None
    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return _check_name(v)

    @field_validator("color", mode="before")
    @classmethod
    def check_color(cls, v):
        return _check_color(v)


class SpecialDay(SpecialDayCreate):
    """A calendar exception record (holiday or event) held by the store."""

    id: int

    def in_month(self, year: int, month: int) -> bool:
        """True if this special day falls in the given year/month."""
        return self.date.year == year and self.date.month == month

    def to_wire(self) -> dict:
        """Serialize with camelCase keys and ISO dates."""
        return self.model_dump(mode="json", by_alias=True)

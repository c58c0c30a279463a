"""Helpers for presenting pydantic validation failures."""

from pydantic import ValidationError as PydanticValidationError


def describe_validation_error(
    error: PydanticValidationError, with_fields: bool = True
) -> str:
    """Collapse a pydantic error into one human-readable line."""
    parts = []
    for err in error.errors():
        msg = err.get("msg", "Invalid value").removeprefix("Value error, ")
        field = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{field}: {msg}" if field and with_fields else msg)
    return "; ".join(parts) or "Invalid value"

"""Output layer for special day exports."""

from roster.exceptions import UnsupportedFormatError
from roster.output.base import SpecialDaysWriter
from roster.output.ics_writer import ICSWriter
from roster.output.json_writer import JSONWriter

WRITERS: dict[str, type] = {
    "ics": ICSWriter,
    "json": JSONWriter,
}


def get_writer(format: str) -> SpecialDaysWriter:
    """Return a writer for the given format name ('ics' or 'json')."""
    writer_cls = WRITERS.get(format.strip().lower())
    if writer_cls is None:
        supported = ", ".join(sorted(WRITERS))
        raise UnsupportedFormatError(
            f"Unsupported export format: {format!r}. Supported formats: {supported}"
        )
    return writer_cls()


__all__ = [
    "ICSWriter",
    "JSONWriter",
    "SpecialDaysWriter",
    "get_writer",
]

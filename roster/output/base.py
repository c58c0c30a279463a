"""Base classes for special day writers."""

from pathlib import Path
from typing import Protocol, Sequence

from roster.models.special_day import SpecialDay


class SpecialDaysWriter(Protocol):
    """Protocol for special day writers."""

    def write(self, special_days: Sequence[SpecialDay], path: Path) -> None:
        """Write special days to file path."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...

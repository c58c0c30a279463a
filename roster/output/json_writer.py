"""JSON file writer for special days."""

import json
from pathlib import Path
from typing import Sequence

from roster.models.special_day import SpecialDay


class JSONWriter:
    """Writer for JSON special day files, in the API wire format."""

    def write(self, special_days: Sequence[SpecialDay], path: Path) -> None:
        """Write special days to JSON file."""
        payload = [day.to_wire() for day in special_days]
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"

"""ICS file writer for special days."""

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Sequence

from icalendar import Calendar, Event

from roster.exceptions import ExportError
from roster.models.special_day import SpecialDay

logger = logging.getLogger(__name__)

UID_DOMAIN = "roster-sync"


def special_day_uid(special_day: SpecialDay) -> str:
    return f"special-day-{special_day.id}@{UID_DOMAIN}"


class ICSWriter:
    """Writer for ICS calendar files.

    Each special day becomes one all-day event. UIDs are derived from the
    record id so re-exports update existing entries in subscribed calendars.
    """

    def __init__(self, calendar_name: str = "Special Days"):
        self.calendar_name = calendar_name

    def build(self, special_days: Sequence[SpecialDay]) -> Calendar:
        cal = Calendar()
        cal.add("prodid", "-//Roster Sync//EN")
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", self.calendar_name)

        stamp = datetime.now()
        for special_day in special_days:
            event = Event()
            event.add("summary", special_day.name)
            event.add("uid", special_day_uid(special_day))
            event.add("dtstamp", stamp)
            # All-day events end on the next day
            event.add("dtstart", special_day.date)
            event.add("dtend", special_day.date + timedelta(days=1))
            if special_day.description:
                event.add("description", special_day.description)
            event.add("color", special_day.color)
            cal.add_component(event)

        return cal

    def write(self, special_days: Sequence[SpecialDay], path: Path) -> None:
        """Write special days to ICS file.

        Raises:
            ExportError: If the calendar could not be serialized or written
        """
        try:
            ical_content = self.build(special_days).to_ical()
            if not ical_content:
                raise ExportError("Calendar.to_ical() returned empty content")

            with open(path, "wb") as f:
                f.write(ical_content)
        except OSError as e:
            # Remove empty file if it was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink(missing_ok=True)
            raise ExportError(f"Failed to write {path}: {e}") from e

        logger.debug(f"Wrote {len(special_days)} special days to {path}")

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"

"""User-facing notifications raised by workflows."""

import itertools
import logging
import threading
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

Variant = Literal["default", "destructive"]


@dataclass(frozen=True)
class Notification:
    """A dismissible message shown to the user."""

    id: int
    title: str
    description: str
    variant: Variant = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class Notifier:
    """Collects notifications until they are dismissed."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._items: list[Notification] = []
        self._lock = threading.Lock()

    def success(self, description: str, title: str = "Success") -> Notification:
        logger.info(description)
        return self._add(title, description, "default")

    def error(self, description: str, title: str = "Error") -> Notification:
        logger.warning(description)
        return self._add(title, description, "destructive")

    def active(self) -> list[Notification]:
        with self._lock:
            return list(self._items)

    def dismiss(self, notification_id: int) -> bool:
        """Remove a notification. Returns False if it was not active."""
        with self._lock:
            for i, item in enumerate(self._items):
                if item.id == notification_id:
                    del self._items[i]
                    return True
        return False

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def _add(self, title: str, description: str, variant: Variant) -> Notification:
        with self._lock:
            notification = Notification(next(self._ids), title, description, variant)
            self._items.append(notification)
            return notification

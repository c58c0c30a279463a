"""Settings workflow: read, update and debounce organization settings."""

import logging
import threading

from roster.client.cache import QueryCache
from roster.client.debounce import Debouncer, TimerFactory
from roster.client.http import ApiClient
from roster.client.notifications import Notifier
from roster.client.results import MutationResult, QueryResult
from roster.dates import day_suffix
from roster.models.settings import (
    DEFAULT_DEADLINE_DAY,
    NameFormat,
    Settings,
    validate_deadline_day,
)
from roster.models.user import User, format_user_name
from roster.workflows.base import Workflow, parse_model

logger = logging.getLogger(__name__)

SETTINGS_KEY = ("/api/admin/settings",)
SETTINGS_PATH = "/api/admin/settings"
NAME_FORMAT_PATH = "/api/admin/name-format"
DEFAULT_DEBOUNCE_SECONDS = 0.5


class SettingsWorkflow(Workflow):
    """Present current settings, accept admin edits and keep the cache consistent.

    Both updates invalidate only the settings key on success. Nothing is
    applied optimistically: the new value shows up once the settings query is
    refetched.

    The deadline slider keeps a local draft. Moves are debounced so a burst
    of changes sends a single request with the last value, and the draft
    survives a failed request so the admin can retry without re-entering it.
    """

    def __init__(
        self,
        client: ApiClient,
        cache: QueryCache,
        notifier: Notifier,
        debounce_delay: float = DEFAULT_DEBOUNCE_SECONDS,
        timer_factory: TimerFactory | None = None,
    ):
        super().__init__(client, cache, notifier)
        if timer_factory is None:
            self.debouncer = Debouncer(debounce_delay)
        else:
            self.debouncer = Debouncer(debounce_delay, timer_factory)

        self._lock = threading.Lock()
        self._draft_deadline_day: int | None = None
        self._synced_deadline_day: int | None = None
        self._name_format_updates = 0
        self._deadline_updates = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def read_settings(self) -> QueryResult:
        """Fetch settings (served from cache unless invalidated)."""
        result = self.cache.fetch(SETTINGS_KEY, self._fetch_settings)
        if result.data is not None:
            self._sync_draft(result.data.deadline_day)
        return result

    def _fetch_settings(self) -> Settings:
        return parse_model(Settings, self.client.get(SETTINGS_PATH))

    def _cached_settings(self) -> Settings | None:
        return self.cache.peek(SETTINGS_KEY).data

    def _sync_draft(self, server_value: int) -> None:
        with self._lock:
            if server_value == self._synced_deadline_day:
                return
            self._synced_deadline_day = server_value
            # An unsent slider value wins over the server value
            if not self.debouncer.pending:
                self._draft_deadline_day = server_value

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def update_name_format(self, name_format: NameFormat | str) -> MutationResult:
        """Persist a new name format."""
        try:
            fmt = NameFormat.parse(name_format)
        except ValueError:
            return self._reject(f"Invalid name format: {name_format!r}")

        with self._lock:
            self._name_format_updates += 1
        try:
            return self._mutate(
                lambda: self.client.put(NAME_FORMAT_PATH, {"format": fmt.value}),
                success_message="Name format updated successfully",
                fallback_message="Failed to update name format",
                invalidate=[SETTINGS_KEY],
            )
        finally:
            with self._lock:
                self._name_format_updates -= 1

    def update_deadline_day(self, day: int) -> MutationResult:
        """Persist a new deadline day immediately (no debounce)."""
        try:
            day = validate_deadline_day(day)
        except ValueError as e:
            return self._reject(str(e))

        with self._lock:
            self._deadline_updates += 1
        try:
            return self._mutate(
                lambda: self.client.put(SETTINGS_PATH, {"deadlineDay": day}),
                success_message="Availability deadline updated successfully",
                fallback_message="Failed to update deadline day",
                invalidate=[SETTINGS_KEY],
            )
        finally:
            with self._lock:
                self._deadline_updates -= 1

    def move_deadline_slider(self, day: int) -> bool:
        """
        Record a slider movement and schedule a debounced commit.

        Args:
            day: New slider position

        Returns:
            True if a commit is pending after this move
        """
        try:
            day = validate_deadline_day(day)
        except ValueError as e:
            self.notifier.error(str(e))
            return False

        with self._lock:
            self._draft_deadline_day = day

        current = self._cached_settings()
        if current is not None and current.deadline_day == day:
            # Back where the server already is; nothing to send
            self.debouncer.cancel()
            return False

        self.debouncer.call(self.update_deadline_day, day)
        return True

    def flush_pending(self) -> bool:
        """Send a pending slider value now instead of waiting for the delay."""
        return self.debouncer.flush()

    # ------------------------------------------------------------------
    # State for presentation
    # ------------------------------------------------------------------

    @property
    def draft_deadline_day(self) -> int | None:
        with self._lock:
            return self._draft_deadline_day

    @property
    def is_updating_name_format(self) -> bool:
        with self._lock:
            return self._name_format_updates > 0

    @property
    def is_updating_deadline(self) -> bool:
        with self._lock:
            return self._deadline_updates > 0

    @property
    def name_format(self) -> NameFormat:
        """Cached name format, or full before settings have loaded."""
        settings = self._cached_settings()
        return settings.name_format if settings is not None else NameFormat.FULL

    def display_name(self, user: User) -> str:
        return format_user_name(user, self.name_format)

    def deadline_reminder(self, day: int | None = None) -> str:
        if day is None:
            day = self.draft_deadline_day or DEFAULT_DEADLINE_DAY
        return (
            "Members will be reminded to provide their availability by the "
            f"{day}{day_suffix(day)} of each month."
        )

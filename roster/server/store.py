"""In-memory roster store with optional JSON file persistence."""

import json
import logging
import threading
from pathlib import Path

from roster.exceptions import (
    InitialsTakenError,
    SpecialDayNotFoundError,
    UserNotFoundError,
)
from roster.models.settings import NameFormat, Settings, SettingsUpdate
from roster.models.special_day import SpecialDay, SpecialDayCreate, SpecialDayUpdate
from roster.models.user import User, generate_initials, unique_initials

logger = logging.getLogger(__name__)


class RosterStore:
    """Settings singleton, special days and members behind one lock.

    When a path is given the whole store is loaded from it on startup and
    rewritten after every mutation. Concurrent writers resolve as
    last-write-wins; there is no version check.
    """

    def __init__(self, path: Path | None = None):
        """
        Initialize store.

        Args:
            path: Optional JSON file to load from and persist to
        """
        self.path = path
        self._lock = threading.RLock()
        self._settings = Settings()
        self._special_days: dict[int, SpecialDay] = {}
        self._users: dict[int, User] = {}
        self._next_special_day_id = 1
        self._next_user_id = 1

        if path is not None and path.exists():
            self._load()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def get_settings(self) -> Settings:
        with self._lock:
            return self._settings.model_copy()

    def update_settings(self, changes: SettingsUpdate) -> Settings:
        """Apply a partial update; fields left unset are unchanged."""
        data = changes.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            self._settings = self._settings.model_copy(update=data)
            self._save()
            logger.info(f"Settings updated: {data}")
            return self._settings.model_copy()

    def get_name_format(self) -> NameFormat:
        with self._lock:
            return self._settings.name_format

    def set_name_format(self, name_format: NameFormat) -> NameFormat:
        return self.update_settings(SettingsUpdate(name_format=name_format)).name_format

    # ------------------------------------------------------------------
    # Special days
    # ------------------------------------------------------------------

    def list_special_days(self) -> list[SpecialDay]:
        with self._lock:
            return sorted(self._special_days.values(), key=lambda d: (d.date, d.id))

    def special_days_by_month(self, year: int, month: int) -> list[SpecialDay]:
        return [d for d in self.list_special_days() if d.in_month(year, month)]

    def get_special_day(self, special_day_id: int) -> SpecialDay:
        with self._lock:
            special_day = self._special_days.get(special_day_id)
        if special_day is None:
            raise SpecialDayNotFoundError(f"Special day {special_day_id} not found")
        return special_day

    def create_special_day(self, fields: SpecialDayCreate) -> SpecialDay:
        with self._lock:
            special_day = SpecialDay(id=self._next_special_day_id, **fields.model_dump())
            self._special_days[special_day.id] = special_day
            self._next_special_day_id += 1
            self._save()
        logger.info(f"Created special day {special_day.id}: {special_day.name}")
        return special_day

    def update_special_day(
        self, special_day_id: int, changes: SpecialDayUpdate
    ) -> SpecialDay:
        data = changes.model_dump(exclude_unset=True)
        with self._lock:
            existing = self.get_special_day(special_day_id)
            updated = SpecialDay.model_validate(existing.model_dump() | data)
            self._special_days[special_day_id] = updated
            self._save()
        logger.info(f"Updated special day {special_day_id}: {sorted(data)}")
        return updated

    def delete_special_day(self, special_day_id: int) -> None:
        with self._lock:
            if self._special_days.pop(special_day_id, None) is None:
                raise SpecialDayNotFoundError(f"Special day {special_day_id} not found")
            self._save()
        logger.info(f"Deleted special day {special_day_id}")

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def list_users(self) -> list[User]:
        with self._lock:
            return sorted(self._users.values(), key=lambda u: u.id)

    def get_user(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    def create_user(
        self,
        first_name: str,
        last_name: str,
        is_admin: bool = False,
        initials: str | None = None,
    ) -> User:
        """Add a member, generating unique initials when none are given."""
        with self._lock:
            if not initials:
                taken = [u.initials for u in self._users.values() if u.initials]
                initials = unique_initials(first_name, last_name, taken)
            user = User(
                id=self._next_user_id,
                first_name=first_name,
                last_name=last_name,
                initials=initials,
                is_admin=is_admin,
            )
            self._users[user.id] = user
            self._next_user_id += 1
            self._save()
        logger.info(f"Created user {user.id} ({user.initials})")
        return user

    def update_user_name(self, user_id: int, first_name: str, last_name: str) -> User:
        """Rename a member.

        Initials follow the new name unless the generated pair already
        belongs to someone else, in which case the current initials stay.
        """
        with self._lock:
            user = self.get_user(user_id)
            initials = generate_initials(first_name, last_name)
            if initials != user.initials and self._initials_taken(initials, user_id):
                initials = user.initials
            user = user.model_copy(
                update={
                    "first_name": first_name,
                    "last_name": last_name,
                    "initials": initials,
                }
            )
            self._users[user_id] = user
            self._save()
        logger.info(f"Renamed user {user_id} ({user.initials})")
        return user

    def update_user_initials(self, user_id: int, initials: str) -> User:
        """Set custom initials; they must not belong to another member."""
        with self._lock:
            user = self.get_user(user_id)
            if self._initials_taken(initials, user_id):
                raise InitialsTakenError(f"Initials {initials} are already in use")
            user = user.model_copy(update={"initials": initials})
            self._users[user_id] = user
            self._save()
        logger.info(f"Set initials for user {user_id}: {initials}")
        return user

    def _initials_taken(self, initials: str, user_id: int) -> bool:
        return any(
            u.initials == initials for u in self._users.values() if u.id != user_id
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _save(self) -> None:
        if self.path is None:
            return
        data = {
            "settings": self._settings.model_dump(mode="json", by_alias=True),
            "specialDays": [
                d.model_dump(mode="json", by_alias=True)
                for d in self._special_days.values()
            ],
            "users": [
                u.model_dump(mode="json", by_alias=True) for u in self._users.values()
            ],
            "nextIds": {
                "specialDay": self._next_special_day_id,
                "user": self._next_user_id,
            },
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))

    def _load(self) -> None:
        data = json.loads(self.path.read_text())
        self._settings = Settings.model_validate(data.get("settings", {}))
        for item in data.get("specialDays", []):
            special_day = SpecialDay.model_validate(item)
            self._special_days[special_day.id] = special_day
        for item in data.get("users", []):
            user = User.model_validate(item)
            self._users[user.id] = user

        next_ids = data.get("nextIds", {})
        self._next_special_day_id = max(
            next_ids.get("specialDay", 1), max(self._special_days, default=0) + 1
        )
        self._next_user_id = max(next_ids.get("user", 1), max(self._users, default=0) + 1)
        logger.info(
            f"Loaded store from {self.path}: {len(self._special_days)} special days, "
            f"{len(self._users)} users"
        )

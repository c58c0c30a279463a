"""Special days workflow: list, filter, create, update and delete."""

import logging
from datetime import date
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roster.client.cache import QueryCache
from roster.client.http import ApiClient
from roster.client.notifications import Notifier
from roster.client.results import MutationResult, QueryResult
from roster.dates import format_month_label, shift_month
from roster.models.special_day import (
    SpecialDay,
    SpecialDayCreate,
    SpecialDayUpdate,
    ViewMode,
)
from roster.models.validation import describe_validation_error
from roster.workflows.base import Workflow, parse_model_list

logger = logging.getLogger(__name__)

SPECIAL_DAYS_KEY = ("/api/special-days",)
SPECIAL_DAYS_MONTH_KEY = ("/api/special-days/month",)
SPECIAL_DAYS_PATH = "/api/special-days"
ADMIN_SPECIAL_DAYS_PATH = "/api/admin/special-days"


class SpecialDaysWorkflow(Workflow):
    """Special day records with an all/month view.

    The list is fetched once per cache lifetime; month filtering happens over
    that fetched list without further requests. Every mutation invalidates
    both the full list and all month-scoped queries.
    """

    def __init__(
        self,
        client: ApiClient,
        cache: QueryCache,
        notifier: Notifier,
        today: date | None = None,
    ):
        super().__init__(client, cache, notifier)
        today = today or date.today()
        self.view_mode = ViewMode.ALL
        self.selected_month: tuple[int, int] = (today.year, today.month)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_special_days(self) -> QueryResult:
        """All special days, ordered by date."""
        return self.cache.fetch(
            SPECIAL_DAYS_KEY,
            lambda: parse_model_list(SpecialDay, self.client.get(SPECIAL_DAYS_PATH)),
        )

    def special_days_for_month(self, year: int, month: int) -> QueryResult:
        """Server-side month query, cached under its own month key."""
        key = SPECIAL_DAYS_MONTH_KEY + (year, month)
        path = f"{SPECIAL_DAYS_PATH}/month/{year}/{month}"
        return self.cache.fetch(
            key, lambda: parse_model_list(SpecialDay, self.client.get(path))
        )

    def visible_special_days(self) -> list[SpecialDay]:
        """The fetched list, filtered to the selected month in month view."""
        days = self.list_special_days().data or []
        if self.view_mode == ViewMode.ALL:
            return list(days)
        year, month = self.selected_month
        return [day for day in days if day.in_month(year, month)]

    @property
    def has_special_days(self) -> bool:
        return bool(self.visible_special_days())

    def empty_message(self) -> str:
        if self.view_mode == ViewMode.MONTH:
            label = format_month_label(*self.selected_month)
            return f"No special days marked for {label}"
        return "No special days have been created yet"

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------

    def set_view_mode(self, mode: ViewMode | str) -> None:
        self.view_mode = ViewMode(mode)

    def toggle_view_mode(self) -> ViewMode:
        self.view_mode = ViewMode.MONTH if self.view_mode == ViewMode.ALL else ViewMode.ALL
        return self.view_mode

    def select_month(self, year: int, month: int) -> None:
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        self.selected_month = (year, month)

    def next_month(self) -> tuple[int, int]:
        self.selected_month = shift_month(*self.selected_month, 1)
        return self.selected_month

    def previous_month(self) -> tuple[int, int]:
        self.selected_month = shift_month(*self.selected_month, -1)
        return self.selected_month

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_special_day(self, fields: SpecialDayCreate | dict[str, Any]) -> MutationResult:
        try:
            new_day = SpecialDayCreate.model_validate(fields)
        except PydanticValidationError as e:
            return self._reject(describe_validation_error(e))

        body = new_day.model_dump(mode="json", by_alias=True)
        return self._mutate(
            lambda: self.client.post(ADMIN_SPECIAL_DAYS_PATH, body),
            success_message="Special day added successfully",
            fallback_message="Failed to create special day",
            invalidate=[SPECIAL_DAYS_KEY, SPECIAL_DAYS_MONTH_KEY],
        )

    def update_special_day(
        self, special_day_id: int, fields: SpecialDayUpdate | dict[str, Any]
    ) -> MutationResult:
        try:
            changes = SpecialDayUpdate.model_validate(fields)
        except PydanticValidationError as e:
            return self._reject(describe_validation_error(e))

        body = changes.model_dump(mode="json", by_alias=True, exclude_unset=True)
        if not body:
            return self._reject("Nothing to update")

        return self._mutate(
            lambda: self.client.patch(f"{ADMIN_SPECIAL_DAYS_PATH}/{special_day_id}", body),
            success_message="Special day updated successfully",
            fallback_message="Failed to update special day",
            invalidate=[SPECIAL_DAYS_KEY, SPECIAL_DAYS_MONTH_KEY],
        )

    def delete_special_day(self, special_day_id: int) -> MutationResult:
        return self._mutate(
            lambda: self.client.delete(f"{ADMIN_SPECIAL_DAYS_PATH}/{special_day_id}"),
            success_message="Special day deleted successfully",
            fallback_message="Failed to delete special day",
            invalidate=[SPECIAL_DAYS_KEY, SPECIAL_DAYS_MONTH_KEY],
        )

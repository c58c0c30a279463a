"""Members workflow: list members with names in the configured format."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roster.client.results import MutationResult, QueryResult
from roster.models.user import (
    MemberCreate,
    MemberInitialsUpdate,
    MemberNameUpdate,
    User,
)
from roster.models.validation import describe_validation_error
from roster.workflows.base import Workflow, parse_model, parse_model_list
from roster.workflows.settings import SettingsWorkflow

MEMBERS_KEY = ("/api/users",)
MEMBERS_PATH = "/api/users"
ADMIN_MEMBERS_PATH = "/api/admin/members"


class MembersWorkflow(Workflow):
    """Member list whose display names follow the settings name format.

    Names are formatted at read time from the cached settings, so a name
    format change shows up once the settings query is refetched; the member
    list itself is not invalidated. Member mutations do invalidate it.
    """

    def __init__(self, client, cache, notifier, settings: SettingsWorkflow):
        super().__init__(client, cache, notifier)
        self.settings = settings

    def list_members(self) -> QueryResult:
        return self.cache.fetch(
            MEMBERS_KEY, lambda: parse_model_list(User, self.client.get(MEMBERS_PATH))
        )

    def member_display_names(self) -> list[tuple[User, str]]:
        """(user, display name) pairs using the current name format."""
        self.settings.read_settings()
        users = self.list_members().data or []
        return [(user, self.settings.display_name(user)) for user in users]

    def create_member(self, first_name: str, last_name: str) -> MutationResult:
        return self._send_member(
            MemberCreate,
            {"first_name": first_name, "last_name": last_name},
            lambda body: self.client.post(ADMIN_MEMBERS_PATH, body),
            success_message="Member added successfully",
            fallback_message="Failed to create member",
        )

    def update_member_name(
        self, user_id: int, first_name: str, last_name: str
    ) -> MutationResult:
        return self._send_member(
            MemberNameUpdate,
            {"first_name": first_name, "last_name": last_name},
            lambda body: self.client.put(f"{ADMIN_MEMBERS_PATH}/{user_id}/name", body),
            success_message="Member name updated successfully",
            fallback_message="Failed to update member name",
        )

    def update_member_initials(self, user_id: int, initials: str) -> MutationResult:
        return self._send_member(
            MemberInitialsUpdate,
            {"initials": initials},
            lambda body: self.client.put(
                f"{ADMIN_MEMBERS_PATH}/{user_id}/initials", body
            ),
            success_message="Member initials updated successfully",
            fallback_message="Failed to update member initials",
        )

    def _send_member(
        self,
        model,
        fields: dict[str, Any],
        send,
        success_message: str,
        fallback_message: str,
    ) -> MutationResult:
        try:
            body = model.model_validate(fields).model_dump(mode="json", by_alias=True)
        except PydanticValidationError as e:
            return self._reject(describe_validation_error(e, with_fields=False))

        return self._mutate(
            lambda: parse_model(User, send(body)),
            success_message=success_message,
            fallback_message=fallback_message,
            invalidate=[MEMBERS_KEY],
        )

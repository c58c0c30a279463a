"""Shared plumbing for data-access workflows."""

import logging
from typing import Any, Callable, Iterable, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from roster.client.cache import QueryCache
from roster.client.http import ApiClient
from roster.client.notifications import Notifier
from roster.client.results import MutationResult
from roster.exceptions import ApiError, RosterError, ValidationError
from roster.models.validation import describe_validation_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def parse_model(model: type[M], payload: Any) -> M:
    """Validate a server payload, raising our ValidationError on mismatch."""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Unexpected {model.__name__} payload: {describe_validation_error(e)}"
        ) from e


def parse_model_list(model: type[M], payload: Any) -> list[M]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValidationError(f"Expected a list of {model.__name__}, got {payload!r}")
    return [parse_model(model, item) for item in payload]


def error_message(error: RosterError, fallback: str) -> str:
    """Pick the message shown to the user for a failed operation.

    Server-provided messages are shown verbatim; transport errors and
    responses without a message get the generic fallback.
    """
    if isinstance(error, ApiError):
        return error.message or fallback
    if isinstance(error, ValidationError):
        return str(error) or fallback
    return fallback


class Workflow:
    """Base class wiring a client, query cache and notifier together."""

    def __init__(self, client: ApiClient, cache: QueryCache, notifier: Notifier):
        self.client = client
        self.cache = cache
        self.notifier = notifier

    def _reject(self, message: str) -> MutationResult:
        """Fail a mutation before anything is sent."""
        self.notifier.error(message)
        return MutationResult.failure(message)

    def _mutate(
        self,
        send: Callable[[], Any],
        success_message: str,
        fallback_message: str,
        invalidate: Iterable = (),
    ) -> MutationResult:
        """
        Run a mutation, then invalidate keys and notify.

        Args:
            send: Zero-argument callable issuing the request
            success_message: Notification text on success
            fallback_message: Notification text when the server gives none
            invalidate: Cache key prefixes to invalidate on success

        Returns:
            MutationResult; failures are converted, never raised
        """
        try:
            data = send()
        except RosterError as e:
            logger.debug(f"Mutation failed: {e}")
            return self._reject(error_message(e, fallback_message))

        for key in invalidate:
            self.cache.invalidate(key)
        self.notifier.success(success_message)
        return MutationResult.success(data)

"""Client data-access layer: HTTP client, query cache, debouncer, notifications."""

from roster.client.cache import QueryCache
from roster.client.debounce import Debouncer
from roster.client.http import ApiClient
from roster.client.notifications import Notification, Notifier
from roster.client.results import MutationResult, QueryResult

__all__ = [
    "ApiClient",
    "Debouncer",
    "MutationResult",
    "Notification",
    "Notifier",
    "QueryCache",
    "QueryResult",
]

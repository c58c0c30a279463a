"""Shared CLI context with lazy-initialized dependencies."""

from roster.client.cache import QueryCache
from roster.client.http import ApiClient
from roster.client.notifications import Notifier
from roster.config import RosterConfig
from roster.workflows.members import MembersWorkflow
from roster.workflows.settings import SettingsWorkflow
from roster.workflows.special_days import SpecialDaysWorkflow


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Commands share one query cache and notifier, so a mutation made through
    one workflow invalidates what the others read.

    Usage:
        ctx = CLIContext()
        result = ctx.settings.read_settings()
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: RosterConfig | None = None,
        api_client: ApiClient | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, show INFO logging on the console
            quiet: If True, suppress non-error output
            config: Preloaded configuration (defaults to environment)
            api_client: Preconfigured API client (defaults to one built from config)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config = config
        self._api_client = api_client
        self._cache: QueryCache | None = None
        self._notifier: Notifier | None = None
        self._settings: SettingsWorkflow | None = None
        self._special_days: SpecialDaysWorkflow | None = None
        self._members: MembersWorkflow | None = None

    @property
    def config(self) -> RosterConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = RosterConfig.from_env()
        return self._config

    @property
    def api_client(self) -> ApiClient:
        if self._api_client is None:
            self._api_client = ApiClient.from_config(self.config)
        return self._api_client

    @property
    def cache(self) -> QueryCache:
        if self._cache is None:
            self._cache = QueryCache()
        return self._cache

    @property
    def notifier(self) -> Notifier:
        if self._notifier is None:
            self._notifier = Notifier()
        return self._notifier

    @property
    def settings(self) -> SettingsWorkflow:
        """Get settings workflow (lazy-loaded)."""
        if self._settings is None:
            self._settings = SettingsWorkflow(
                self.api_client,
                self.cache,
                self.notifier,
                debounce_delay=self.config.deadline_debounce_seconds,
            )
        return self._settings

    @property
    def special_days(self) -> SpecialDaysWorkflow:
        """Get special days workflow (lazy-loaded)."""
        if self._special_days is None:
            self._special_days = SpecialDaysWorkflow(
                self.api_client, self.cache, self.notifier
            )
        return self._special_days

    @property
    def members(self) -> MembersWorkflow:
        """Get members workflow (lazy-loaded)."""
        if self._members is None:
            self._members = MembersWorkflow(
                self.api_client, self.cache, self.notifier, self.settings
            )
        return self._members


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx

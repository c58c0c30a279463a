"""Exception hierarchy for roster operations."""


class RosterError(Exception):
    """Base exception for roster operations."""

    pass


class ValidationError(RosterError):
    """Input outside its allowed domain."""

    pass


class ApiError(RosterError):
    """Non-success HTTP response from the roster service."""

    def __init__(
        self, status_code: int, message: str | None = None, body: str | None = None
    ):
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(f"{status_code}: {message or body or 'Request failed'}")


class NetworkError(RosterError):
    """Request failed to complete."""

    pass


class SpecialDayNotFoundError(RosterError):
    """Special day not found."""

    pass


class UserNotFoundError(RosterError):
    """User not found."""

    pass


class UnsupportedFormatError(RosterError):
    """Export format not supported."""

    pass


class ExportError(RosterError):
    """Error during special days export."""

    pass


class InitialsTakenError(RosterError):
    """Initials already belong to another member."""

    pass

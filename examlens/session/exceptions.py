class SessionError(Exception):
    """Base exception for session state errors."""


class InvalidTransitionError(SessionError):
    """Raised when an event is not allowed in the current state."""

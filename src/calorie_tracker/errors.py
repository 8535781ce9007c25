"""Application error types."""


class TrackerError(Exception):
    """Base error for the calorie tracker."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PersistenceError(TrackerError):
    """Raised when the data store rejects a query or insert."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class AuthenticationError(TrackerError):
    """Raised when the auth provider rejects a request."""


class GoalNotFoundError(TrackerError):
    """Raised when a user has no active daily goal to update."""

"""Custom exception hierarchy for LinguaLearn application."""


class LinguaLearnError(Exception):
    """Base exception for all LinguaLearn errors."""

    kind = "error"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class AccessDeniedError(LinguaLearnError):
    """A row-level policy rejected the request."""

    kind = "access_denied"

    def __init__(self, message: str = "Access denied", status_code: int = 403) -> None:
        super().__init__(message, status_code=status_code)


class AuthenticationRequiredError(AccessDeniedError):
    """The request carries no valid identity."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, status_code=401)


class NotFoundError(LinguaLearnError):
    """Resource not found error."""

    kind = "not_found"

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ReferencedRowNotFoundError(NotFoundError):
    """A write referenced a catalog row that does not exist."""

    def __init__(self, message: str = "Referenced row does not exist") -> None:
        super().__init__(message)


class ConstraintViolationError(LinguaLearnError):
    """A uniqueness or check constraint rejected a write."""

    kind = "constraint_violation"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=409)


class TransportFailureError(LinguaLearnError):
    """The data store could not be reached."""

    kind = "transport_failure"

    def __init__(self, message: str = "Data store unavailable") -> None:
        super().__init__(message, status_code=503)

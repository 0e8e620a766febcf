"""Exceptions raised by the record-access layer and the builders.

Each exception carries the HTTP status it maps to; the application registers a
single handler that turns any ``JoblyError`` into a JSON error response.
"""


class JoblyError(Exception):
    """Base exception for all Jobly errors."""

    status_code: int = 500

    def __init__(self, message: str | list[str] = "Internal Server Error", status_code: int | None = None):
        """Initialize exception with message and optional status override.

        Args:
            message: Human-readable error message, or a list of messages
            status_code: HTTP status to report instead of the class default
        """
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(JoblyError):
    """Raised when input is invalid: empty updates, bad filters, duplicates."""

    status_code = 400

    def __init__(self, message: str | list[str] = "Bad Request"):
        super().__init__(message)


class NotFoundError(JoblyError):
    """Raised when a requested record does not exist."""

    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """Raised when the caller is not logged in or lacks the required tier."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(JoblyError):
    """Raised when a logged-in caller may not perform the action."""

    status_code = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)

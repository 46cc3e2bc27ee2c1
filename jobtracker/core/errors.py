"""
Typed application errors.

Every error raised across the API boundary carries an HTTP status code and a
message that is safe to show to the client. Anything that is not an AppError
is reported as a generic 500 by the global handlers.
"""


class AppError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Something went wrong, try again later"):
        super().__init__(message)
        self.message = message


class BadRequest(AppError):
    """Missing or empty required fields."""

    status_code = 400
    code = "BAD_REQUEST"


class DuplicateCredential(AppError):
    """Email already belongs to another account."""

    status_code = 400
    code = "DUPLICATE_CREDENTIAL"

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class Unauthenticated(AppError):
    """Missing, invalid or expired token."""

    status_code = 401
    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Authentication invalid"):
        super().__init__(message)


class InvalidCredential(Unauthenticated):
    """Unknown email or wrong password. Both cases share one message."""

    code = "INVALID_CREDENTIAL"

    def __init__(self, message: str = "Incorrect email or password"):
        super().__init__(message)


class NotFound(AppError):
    """Resource is absent or owned by someone else."""

    status_code = 404
    code = "NOT_FOUND"


class InvalidToken(Exception):
    """Token could not be decoded or its signature does not match."""


class ExpiredToken(InvalidToken):
    """Token signature is valid but its expiry has passed."""

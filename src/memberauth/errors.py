from abc import ABC
from enum import StrEnum


class AuthErrorKind(StrEnum):
    """Expected, user-correctable auth outcomes."""

    MISSING_FIELDS = "missing_fields"
    VALIDATION_ERROR = "validation_error"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class AuthenticationError(UserError):
    """Raised when a request has no live session."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class AuthError(UserError):
    """Base class for failures of signup and login."""

    kind: AuthErrorKind


class MissingFieldsError(AuthError):
    """Raised when a required form field is absent or empty."""

    kind = AuthErrorKind.MISSING_FIELDS

    def __init__(self, message: str = "Please fill in all fields.") -> None:
        super().__init__(message)


class ValidationError(AuthError):
    """Raised when user input fails validation."""

    kind = AuthErrorKind.VALIDATION_ERROR


class DuplicateEmailError(AuthError):
    """Raised when signing up with an email that already has an account."""

    kind = AuthErrorKind.DUPLICATE_EMAIL

    def __init__(self, message: str = "An account with this email already exists.") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when login fails, whether the email or the password was wrong."""

    kind = AuthErrorKind.INVALID_CREDENTIALS

    def __init__(self, message: str = "User and password not found.") -> None:
        super().__init__(message)

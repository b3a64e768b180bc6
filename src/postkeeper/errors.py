from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when no credentials are presented or the credentials are wrong."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a presented bearer token is malformed, forged or expired."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class ConflictError(UserError):
    """Raised when a unique value (e.g. an email) is already claimed."""


class StoreError(Exception):
    """Raised when the underlying store fails.

    Not a UserError: the web layer reports it as a server error, attaching
    the underlying message.
    """

"""Domain error taxonomy shared by services and the API boundary.

Each error carries the HTTP status it maps to. The API layer converts any
``DomainError`` into the ``{success, message}`` envelope; nothing below the
boundary catches or retries these.
"""

from __future__ import annotations

from fastapi import status


class DomainError(Exception):
    """Base class for errors that map to a stable API response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"
    detail: str | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class SelfMessageDenied(ValidationError):
    default_message = "Cannot send message to yourself"


class DuplicateEmail(DomainError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User with this email already exists"


class AuthError(DomainError):
    """Authentication failed: bad credentials, bad token or missing profile."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class InvalidCredentials(AuthError):
    default_message = "Invalid email or password"


class MissingProfile(AuthError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User profile not found"


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ProfileNotFound(NotFound):
    default_message = "Profile not found"


class ReceiverNotFound(NotFound):
    default_message = "Receiver not found"


class MessageNotFound(NotFound):
    default_message = "Message not found"


class Forbidden(DomainError):
    """Caller is not a party to the resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class PermissionDenied(DomainError):
    """Conversation-gate policy violation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Permission denied"


class StoreError(DomainError):
    """The persistence layer failed; ``detail`` carries the driver message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database error"

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


__all__ = [
    "AuthError",
    "DomainError",
    "DuplicateEmail",
    "Forbidden",
    "InvalidCredentials",
    "MessageNotFound",
    "MissingProfile",
    "NotFound",
    "PermissionDenied",
    "ProfileNotFound",
    "ReceiverNotFound",
    "SelfMessageDenied",
    "StoreError",
    "ValidationError",
]

"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .common import Envelope, ok
from .message import MessageCreate, MessageResponse, to_message_response
from .user import (
    AccountResponse,
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    SignupRequest,
    to_account_response,
)

__all__ = [
    "Envelope", "ok",
    "MessageCreate", "MessageResponse", "to_message_response",
    "AccountResponse", "AuthResponse", "LoginRequest", "ProfileResponse", "SignupRequest",
    "to_account_response",
]

# src/cleaning_platform/models/__init__.py
"""SQLAlchemy models for the Cleaning Platform application."""

from .message import Message
from .user import Profile, Role, User

__all__ = [
    "Message",
    "Profile", "Role", "User",
]

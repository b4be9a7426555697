# src/cleaning_platform/services/__init__.py
"""Business logic services for the Cleaning Platform application."""

from .account_service import AccountService, AuthResult
from .contacts import ContactVisibilityResolver
from .conversation_gate import ConversationGate, DenialReason, SendDecision, is_send_permitted
from .message_lifecycle import MessageLifecycle

__all__ = [
    "AccountService",
    "AuthResult",
    "ContactVisibilityResolver",
    "ConversationGate",
    "DenialReason",
    "MessageLifecycle",
    "SendDecision",
    "is_send_permitted",
]

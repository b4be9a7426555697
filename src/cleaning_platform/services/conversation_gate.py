# src/cleaning_platform/services/conversation_gate.py
"""Send permission checks between owners and housekeepers.

Housekeepers may message any owner. Owners may message other owners freely,
but may only message a housekeeper once a conversation with that housekeeper
exists, in either direction and regardless of delete flags.
"""

from __future__ import annotations

import enum
import logging
import uuid
from dataclasses import dataclass
from typing import assert_never

from cleaning_platform.core.errors import (
    DomainError,
    PermissionDenied,
    ReceiverNotFound,
    SelfMessageDenied,
)
from cleaning_platform.models import Role
from cleaning_platform.repositories.identity_repo import IdentityRepository
from cleaning_platform.repositories.message_repo import MessageRepository

logger = logging.getLogger(__name__)


def is_send_permitted(
    sender_role: Role,
    receiver_role: Role,
    prior_conversation_exists: bool,
) -> bool:
    """Return True if a sender with ``sender_role`` may message ``receiver_role``."""
    if sender_role is Role.HOUSEKEEPER:
        return True
    if sender_role is Role.OWNER:
        if receiver_role is Role.OWNER:
            return True
        if receiver_role is Role.HOUSEKEEPER:
            return prior_conversation_exists
        assert_never(receiver_role)
    assert_never(sender_role)


class DenialReason(enum.Enum):
    RECEIVER_NOT_FOUND = "receiver_not_found"
    SELF_MESSAGE = "self_message"
    MUST_BE_CONTACTED_FIRST = "must_be_contacted_first"


_DENIAL_ERRORS: dict[DenialReason, tuple[type[DomainError], str | None]] = {
    DenialReason.RECEIVER_NOT_FOUND: (ReceiverNotFound, None),
    DenialReason.SELF_MESSAGE: (SelfMessageDenied, None),
    DenialReason.MUST_BE_CONTACTED_FIRST: (
        PermissionDenied,
        "Owners can only message housekeepers who have contacted them first",
    ),
}


@dataclass(frozen=True)
class SendDecision:
    """Outcome of a send permission check."""

    reason: DenialReason | None = None

    @property
    def allowed(self) -> bool:
        return self.reason is None

    def raise_for_denial(self) -> None:
        """Raise the domain error matching the denial reason, if any."""
        if self.reason is None:
            return
        error_cls, message = _DENIAL_ERRORS[self.reason]
        raise error_cls(message)


ALLOW = SendDecision()


class ConversationGate:
    """Decides whether a sender may message a receiver."""

    def __init__(self, identity: IdentityRepository, messages: MessageRepository) -> None:
        self.identity = identity
        self.messages = messages

    def can_send(
        self,
        sender_id: uuid.UUID,
        sender_role: Role,
        receiver_id: uuid.UUID,
    ) -> SendDecision:
        """Evaluate the send rules in order and return the first denial, if any."""
        receiver = self.identity.get_profile(receiver_id)
        if receiver is None:
            return SendDecision(DenialReason.RECEIVER_NOT_FOUND)

        if sender_id == receiver_id:
            return SendDecision(DenialReason.SELF_MESSAGE)

        # Only owner -> housekeeper depends on history; skip the lookup otherwise.
        needs_history = sender_role is Role.OWNER and receiver.role is Role.HOUSEKEEPER
        prior = needs_history and self.messages.conversation_exists(sender_id, receiver_id)

        if not is_send_permitted(sender_role, receiver.role, prior):
            logger.info(
                "Denied %s %s -> %s %s: no prior conversation",
                sender_role.value,
                sender_id,
                receiver.role.value,
                receiver_id,
            )
            return SendDecision(DenialReason.MUST_BE_CONTACTED_FIRST)
        return ALLOW

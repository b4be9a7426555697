# src/cleaning_platform/services/message_lifecycle.py
"""Soft deletion of messages."""

from __future__ import annotations

import logging
import uuid

from cleaning_platform.core.errors import Forbidden, MessageNotFound
from cleaning_platform.models import Message
from cleaning_platform.repositories.message_repo import MessageRepository

logger = logging.getLogger(__name__)


class MessageLifecycle:
    """Applies per-participant or global soft deletes."""

    def __init__(self, messages: MessageRepository) -> None:
        self.messages = messages

    def delete(
        self,
        message_id: int,
        requester_id: uuid.UUID,
        *,
        for_everyone: bool = False,
    ) -> Message:
        """Hide a message for the requester, or for both parties.

        Deleting for everyone is reserved to the sender and sets both flags.
        Otherwise only the requester's own flag is set. Flags are never
        cleared, so repeating a delete is a no-op that still succeeds.

        Raises:
            MessageNotFound: If the message does not exist.
            Forbidden: If the requester is not a participant, or asks to delete
                for everyone without being the sender.
        """
        message = self.messages.get(message_id)
        if message is None:
            raise MessageNotFound()

        if not message.involves(requester_id):
            raise Forbidden("Unauthorized to delete this message")

        if for_everyone:
            if requester_id != message.sender_id:
                raise Forbidden("Only the sender can delete a message for everyone")
            message.deleted_for_sender = True
            message.deleted_for_receiver = True
        elif requester_id == message.sender_id:
            message.deleted_for_sender = True
        else:
            message.deleted_for_receiver = True

        self.messages.session.flush()
        logger.info(
            "Message %s deleted by %s (for_everyone=%s)", message_id, requester_id, for_everyone
        )
        return message

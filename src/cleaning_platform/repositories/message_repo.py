"""Data access helpers for direct messages."""
from __future__ import annotations

import uuid

from sqlalchemy import and_, exists, or_, select
from sqlalchemy.orm import Session

from cleaning_platform.core.errors import ValidationError
from cleaning_platform.models import Message

__all__ = ["MessageRepository"]

# Upper bound of the INTEGER primary key on every supported backend.
MAX_MESSAGE_ID = 2**31 - 1


class MessageRepository:
    """Persistence and lookups for messages.

    History checks (``conversation_exists``, ``counterpart_ids``) look at every
    row regardless of delete flags. Read paths that return messages to a viewer
    hide the rows that viewer has deleted on their side.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, message_id: int) -> Message | None:
        """Return a message by identifier, or None when no such row can exist."""
        if not 1 <= message_id <= MAX_MESSAGE_ID:
            return None
        return self.session.get(Message, message_id)

    def send(self, sender_id: uuid.UUID, receiver_id: uuid.UUID, body: str) -> Message:
        """Insert a new message and return the persisted ORM instance.

        Raises:
            ValidationError: If the body is empty once trimmed.
        """
        text = body.strip()
        if not text:
            raise ValidationError("Message cannot be empty")
        message = Message(
            sender_id=sender_id,
            receiver_id=receiver_id,
            body=text,
            deleted_for_sender=False,
            deleted_for_receiver=False,
        )
        self.session.add(message)
        self.session.flush()
        return message

    def fetch_all_for_user(self, user_id: uuid.UUID) -> list[Message]:
        """Return every message the user sent or received and has not hidden."""
        stmt = (
            select(Message)
            .where(
                or_(
                    and_(Message.sender_id == user_id, Message.deleted_for_sender.is_(False)),
                    and_(Message.receiver_id == user_id, Message.deleted_for_receiver.is_(False)),
                )
            )
            .order_by(Message.created_at.asc(), Message.id.asc())
        )
        return list(self.session.execute(stmt).scalars())

    def fetch_conversation(self, user_id: uuid.UUID, other_id: uuid.UUID) -> list[Message]:
        """Return the pair's messages as seen by ``user_id``, oldest first."""
        sent = and_(
            Message.sender_id == user_id,
            Message.receiver_id == other_id,
            Message.deleted_for_sender.is_(False),
        )
        received = and_(
            Message.sender_id == other_id,
            Message.receiver_id == user_id,
            Message.deleted_for_receiver.is_(False),
        )
        stmt = (
            select(Message)
            .where(or_(sent, received))
            .order_by(Message.created_at.asc(), Message.id.asc())
        )
        return list(self.session.execute(stmt).scalars())

    def conversation_exists(self, user_a: uuid.UUID, user_b: uuid.UUID) -> bool:
        """Return True if any message was ever exchanged between the pair."""
        stmt = select(
            exists().where(
                or_(
                    and_(Message.sender_id == user_a, Message.receiver_id == user_b),
                    and_(Message.sender_id == user_b, Message.receiver_id == user_a),
                )
            )
        )
        return bool(self.session.execute(stmt).scalar())

    def counterpart_ids(self, user_id: uuid.UUID) -> set[uuid.UUID]:
        """Return every user that has exchanged at least one message with ``user_id``."""
        received_from = select(Message.sender_id).where(Message.receiver_id == user_id)
        sent_to = select(Message.receiver_id).where(Message.sender_id == user_id)
        stmt = received_from.union(sent_to)
        return set(self.session.execute(stmt).scalars())

# src/cleaning_platform/models/message.py
"""Models describing direct messages between users."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from cleaning_platform.db.session import Base, utcnow


class Message(Base):
    """Plain-text message exchanged between two users.

    Rows are never removed by the application. Each participant hides a
    message through their own ``deleted_for_*`` flag, and the flags only ever
    move from false to true. The integer primary key doubles as the insertion
    sequence used to order messages sharing a timestamp.
    """

    __tablename__ = "messages"
    __table_args__ = (
        CheckConstraint("sender_id <> receiver_id", name="ck_messages_not_self"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    sender_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    receiver_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    body: Mapped[str] = mapped_column("message", Text, nullable=False)

    deleted_for_sender: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    deleted_for_receiver: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )

    def involves(self, user_id: uuid.UUID) -> bool:
        """Return True if ``user_id`` is the sender or the receiver."""
        return user_id in (self.sender_id, self.receiver_id)

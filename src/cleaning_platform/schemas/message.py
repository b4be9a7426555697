"""Message-related Pydantic schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cleaning_platform.models import Message


class MessageCreate(BaseModel):
    """Schema for sending a new message."""

    receiver_id: uuid.UUID = Field(..., description="User id of the recipient")
    message: str = Field(..., description="Message body; surrounding whitespace is trimmed")


class MessageResponse(BaseModel):
    """Schema for message information returned by the API."""

    id: int
    sender_id: uuid.UUID
    receiver_id: uuid.UUID
    message: str
    deleted_for_sender: bool
    deleted_for_receiver: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


def to_message_response(message: Message) -> MessageResponse:
    """Convert a Message ORM instance to an API schema."""
    return MessageResponse(
        id=message.id,
        sender_id=message.sender_id,
        receiver_id=message.receiver_id,
        message=message.body,
        deleted_for_sender=message.deleted_for_sender,
        deleted_for_receiver=message.deleted_for_receiver,
        created_at=message.created_at,
    )

# src/cleaning_platform/api/v1/endpoints/messages.py
"""Direct message endpoints for the Cleaning Platform API."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Query, status

from cleaning_platform.api.v1.dependencies import (
    AuthDep,
    ContactResolverDep,
    ConversationGateDep,
    MessageLifecycleDep,
    MessageRepoDep,
    SessionDep,
)
from cleaning_platform.core.errors import Forbidden
from cleaning_platform.db.session import commit_or_raise
from cleaning_platform.schemas.common import Envelope, ok
from cleaning_platform.schemas.message import MessageCreate, MessageResponse, to_message_response
from cleaning_platform.schemas.user import ProfileResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])

# Literal paths are registered before the catch-all /{user_id} route.


@router.get("/users/list", response_model=Envelope[list[ProfileResponse]])
def list_contacts(auth: AuthDep, resolver: ContactResolverDep) -> Envelope[list[ProfileResponse]]:
    """List the profiles the caller may chat with."""
    profiles = resolver.list_visible_contacts(auth.user_id)
    return ok([ProfileResponse.model_validate(profile) for profile in profiles])


@router.get(
    "/conversation/{other_user_id}",
    response_model=Envelope[list[MessageResponse]],
)
def get_conversation(
    other_user_id: uuid.UUID,
    auth: AuthDep,
    messages: MessageRepoDep,
) -> Envelope[list[MessageResponse]]:
    """Get the caller's view of the conversation with another user."""
    conversation = messages.fetch_conversation(auth.user_id, other_user_id)
    return ok([to_message_response(message) for message in conversation])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[MessageResponse],
)
def send_message(
    payload: MessageCreate,
    auth: AuthDep,
    db: SessionDep,
    gate: ConversationGateDep,
    messages: MessageRepoDep,
) -> Envelope[MessageResponse]:
    """Send a message if the conversation rules allow it."""
    gate.can_send(auth.user_id, auth.role, payload.receiver_id).raise_for_denial()

    new_message = messages.send(auth.user_id, payload.receiver_id, payload.message)
    commit_or_raise(db)
    db.refresh(new_message)

    logger.info("Message %s sent from %s to %s", new_message.id, auth.user_id, payload.receiver_id)
    return ok(to_message_response(new_message), "Message sent successfully")


@router.delete("/{message_id}", response_model=Envelope[MessageResponse])
def delete_message(
    message_id: int,
    auth: AuthDep,
    db: SessionDep,
    lifecycle: MessageLifecycleDep,
    for_everyone: bool = Query(False, description="Unsend for both participants"),
) -> Envelope[MessageResponse]:
    """Hide a message for the caller, or for both sides when unsending."""
    message = lifecycle.delete(message_id, auth.user_id, for_everyone=for_everyone)
    commit_or_raise(db)
    db.refresh(message)
    return ok(to_message_response(message), "Message deleted successfully")


@router.get("/{user_id}", response_model=Envelope[list[MessageResponse]])
def get_all_messages(
    user_id: uuid.UUID,
    auth: AuthDep,
    messages: MessageRepoDep,
) -> Envelope[list[MessageResponse]]:
    """Get every message the caller sent or received."""
    if user_id != auth.user_id:
        raise Forbidden("Unauthorized to view these messages")
    return ok([to_message_response(message) for message in messages.fetch_all_for_user(user_id)])

"""Shared API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from cleaning_platform.core.errors import AuthError
from cleaning_platform.core.security import AuthContext, auth_context_from_token
from cleaning_platform.db.session import get_db
from cleaning_platform.repositories.identity_repo import IdentityRepository
from cleaning_platform.repositories.message_repo import MessageRepository
from cleaning_platform.services import (
    AccountService,
    ContactVisibilityResolver,
    ConversationGate,
    MessageLifecycle,
)

# Missing headers are reported through AuthError so they share the envelope.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AuthContext:
    """Verify the bearer token and return the caller's identity.

    Raises:
        AuthError: If the header is missing or the token is invalid.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required")
    return auth_context_from_token(credentials.credentials)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


def get_message_repository(db: SessionDep) -> MessageRepository:
    return MessageRepository(db)


def get_identity_repository(db: SessionDep) -> IdentityRepository:
    return IdentityRepository(db)


MessageRepoDep = Annotated[MessageRepository, Depends(get_message_repository)]
IdentityRepoDep = Annotated[IdentityRepository, Depends(get_identity_repository)]


def get_account_service(db: SessionDep) -> AccountService:
    return AccountService(db)


def get_contact_resolver(
    identity: IdentityRepoDep, messages: MessageRepoDep
) -> ContactVisibilityResolver:
    return ContactVisibilityResolver(identity, messages)


def get_conversation_gate(identity: IdentityRepoDep, messages: MessageRepoDep) -> ConversationGate:
    return ConversationGate(identity, messages)


def get_message_lifecycle(messages: MessageRepoDep) -> MessageLifecycle:
    return MessageLifecycle(messages)


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
ContactResolverDep = Annotated[ContactVisibilityResolver, Depends(get_contact_resolver)]
ConversationGateDep = Annotated[ConversationGate, Depends(get_conversation_gate)]
MessageLifecycleDep = Annotated[MessageLifecycle, Depends(get_message_lifecycle)]

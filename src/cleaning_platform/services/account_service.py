"""Signup and login."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cleaning_platform.core import security
from cleaning_platform.core.errors import DuplicateEmail, InvalidCredentials, MissingProfile
from cleaning_platform.models import Profile, Role, User
from cleaning_platform.repositories.identity_repo import IdentityRepository

logger = logging.getLogger(__name__)

__all__ = ["AccountService", "AuthResult"]


@dataclass(frozen=True)
class AuthResult:
    """Authenticated account plus its freshly issued access token."""

    user: User
    profile: Profile
    token: str


class AccountService:
    """Creates accounts and authenticates them with email and password."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.identity = IdentityRepository(session)

    def signup(self, *, email: str, password: str, name: str, role: Role) -> AuthResult:
        """Create a user and its profile in a single transaction.

        Raises:
            DuplicateEmail: If the email is already registered.
        """
        if self.identity.get_user_by_email(email) is not None:
            raise DuplicateEmail()

        try:
            user = self.identity.create_account(
                email=email,
                password_hash=security.hash_password(password),
                name=name,
                role=role,
            )
            self.session.commit()
        except IntegrityError as err:
            # Lost a race with a concurrent signup for the same email.
            self.session.rollback()
            raise DuplicateEmail() from err

        self.session.refresh(user)
        profile = user.profile
        logger.info("Registered %s account %s", profile.role.value, user.id)
        return AuthResult(
            user=user,
            profile=profile,
            token=security.issue_token_for(user.id, user.email, profile.role),
        )

    def login(self, *, email: str, password: str) -> AuthResult:
        """Verify credentials and issue a token.

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong.
            MissingProfile: If the account has no profile.
        """
        user = self.identity.get_user_by_email(email)
        if user is None or not security.verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentials()

        profile = self.identity.get_profile(user.id)
        if profile is None:
            raise MissingProfile()

        return AuthResult(
            user=user,
            profile=profile,
            token=security.issue_token_for(user.id, user.email, profile.role),
        )

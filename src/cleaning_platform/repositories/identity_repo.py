"""Data access helpers for users and their profiles."""
from __future__ import annotations

import uuid
from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.orm import Session

from cleaning_platform.models import Profile, Role, User

__all__ = ["IdentityRepository"]


class IdentityRepository:
    """Thin wrapper around database access for users and profiles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_user_by_email(self, email: str) -> User | None:
        """Return a user by normalized email address."""
        return self.session.execute(
            select(User).where(User.email == email.strip().lower())
        ).scalars().first()

    def get_profile(self, user_id: uuid.UUID) -> Profile | None:
        """Return the profile attached to ``user_id``."""
        return self.session.execute(
            select(Profile).where(Profile.user_id == user_id)
        ).scalars().first()

    def list_profiles(
        self,
        role: Role,
        *,
        exclude_user_id: uuid.UUID | None = None,
        user_ids: Collection[uuid.UUID] | None = None,
    ) -> list[Profile]:
        """Return profiles with ``role`` sorted by name ascending.

        Args:
            role: Role to filter on.
            exclude_user_id: Optional user to leave out of the result.
            user_ids: When given, restrict the result to these users.
        """
        if user_ids is not None and not user_ids:
            return []
        stmt = select(Profile).where(Profile.role == role)
        if exclude_user_id is not None:
            stmt = stmt.where(Profile.user_id != exclude_user_id)
        if user_ids is not None:
            stmt = stmt.where(Profile.user_id.in_(list(user_ids)))
        stmt = stmt.order_by(Profile.name.asc(), Profile.user_id.asc())
        return list(self.session.execute(stmt).scalars())

    def create_account(
        self,
        *,
        email: str,
        password_hash: str,
        name: str,
        role: Role,
    ) -> User:
        """Stage a user together with its profile and flush both.

        The caller owns the transaction; both rows become visible on the same
        commit or disappear on the same rollback.
        """
        user = User(email=email.strip().lower(), password_hash=password_hash)
        user.profile = Profile(name=name.strip(), role=role)
        self.session.add(user)
        self.session.flush()
        return user

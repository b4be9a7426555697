# src/cleaning_platform/services/contacts.py
"""Contact list resolution for the chat sidebar."""

from __future__ import annotations

import uuid
from typing import assert_never

from cleaning_platform.core.errors import ProfileNotFound
from cleaning_platform.models import Profile, Role
from cleaning_platform.repositories.identity_repo import IdentityRepository
from cleaning_platform.repositories.message_repo import MessageRepository


class ContactVisibilityResolver:
    """Computes which profiles a user may see as chat contacts."""

    def __init__(self, identity: IdentityRepository, messages: MessageRepository) -> None:
        self.identity = identity
        self.messages = messages

    def list_visible_contacts(self, requester_id: uuid.UUID) -> list[Profile]:
        """Return the requester's contacts, never including the requester.

        Housekeepers see every owner. Owners see every other owner, followed by
        the housekeepers they have exchanged at least one message with (deleted
        messages count). Each group is sorted by name on its own; the groups
        are concatenated, not re-sorted together.

        Raises:
            ProfileNotFound: If the requester has no profile.
        """
        requester = self.identity.get_profile(requester_id)
        if requester is None:
            raise ProfileNotFound()

        owners = self.identity.list_profiles(Role.OWNER, exclude_user_id=requester_id)
        if requester.role is Role.HOUSEKEEPER:
            return owners
        if requester.role is Role.OWNER:
            counterparts = self.messages.counterpart_ids(requester_id)
            housekeepers = self.identity.list_profiles(
                Role.HOUSEKEEPER,
                exclude_user_id=requester_id,
                user_ids=counterparts,
            )
            return owners + housekeepers
        assert_never(requester.role)

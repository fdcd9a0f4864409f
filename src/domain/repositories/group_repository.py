"""Invite and group membership repository protocols."""

from typing import Protocol
from uuid import UUID

from domain.entities.group import GroupMembership, Invite


class IInviteRepository(Protocol):
    """Repository interface for Invite entities."""

    async def get_by_code(self, code: str) -> Invite | None:
        """Get an invite by its code, with its group loaded."""
        ...


class IGroupMembershipRepository(Protocol):
    """Repository interface for GroupMembership entities."""

    async def create(self, membership: GroupMembership) -> GroupMembership:
        """Create a group membership."""
        ...

    async def count_by_invite(self, invite_id: UUID) -> int:
        """Count memberships granted through an invite."""
        ...

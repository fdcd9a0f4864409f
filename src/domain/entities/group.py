"""Group, invite and membership domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Group:
    """Domain entity for a group of users."""

    name: str
    created_by_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Invite:
    """A redeemable code granting membership in a group."""

    code: str
    group_id: UUID
    created_by_id: UUID
    expiration_time: datetime
    max_members: int
    id: UUID = field(default_factory=uuid4)
    group: Group | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_expired(self, now: datetime) -> bool:
        """An invite stays usable only while its expiration is in the future."""
        return self.expiration_time <= now

    def has_capacity(self, member_count: int) -> bool:
        """Check whether another member may join through this invite."""
        return member_count < self.max_members


@dataclass
class GroupMembership:
    """Links a user to a group through the invite that granted access."""

    user_id: UUID
    group_id: UUID
    invite_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

"""User domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from domain.entities.profile import Profile


class AuthProvider(StrEnum):
    """Identity provider a user signed up with."""

    EMAIL = "EMAIL"
    GOOGLE = "GOOGLE"
    APPLE = "APPLE"


class UserStatus(StrEnum):
    """Lifecycle status of a user account."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"


@dataclass
class User:
    """Domain entity for an account identity."""

    email: str
    name: str
    source: AuthProvider = AuthProvider.EMAIL
    id: UUID = field(default_factory=uuid4)
    source_user_id: str | None = None
    password: str | None = None
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    profile: Profile | None = None

    @property
    def is_pending(self) -> bool:
        """Check if the account still awaits email confirmation."""
        return self.status == UserStatus.PENDING

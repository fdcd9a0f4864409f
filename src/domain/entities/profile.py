"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Profile:
    """Domain entity for the public identity of a user."""

    user_id: UUID
    username: str
    id: UUID = field(default_factory=uuid4)
    picture_url: str | None = None
    bio: str | None = None
    private: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

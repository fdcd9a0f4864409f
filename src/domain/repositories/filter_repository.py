"""Filter repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.filter import Filter


class IFilterRepository(Protocol):
    """Repository interface for saved search filters."""

    async def create_many(self, filters: list[Filter]) -> list[Filter]:
        """Create several filters at once."""
        ...

    async def get_for_user(self, user_id: UUID) -> list[Filter]:
        """Get a user's filters ordered by position."""
        ...

"""User and profile repository protocols."""

from typing import Protocol

from domain.entities.profile import Profile
from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case, with its profile loaded."""
        ...

    async def create(self, user: User) -> User:
        """Create a new user."""
        ...


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def create(self, profile: Profile) -> Profile:
        """Create a profile for an existing user."""
        ...

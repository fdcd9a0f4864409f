"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.filter_repository import IFilterRepository
from domain.repositories.group_repository import IGroupMembershipRepository, IInviteRepository
from domain.repositories.user_repository import IProfileRepository, IUserRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    users: IUserRepository
    profiles: IProfileRepository
    invites: IInviteRepository
    group_memberships: IGroupMembershipRepository
    filters: IFilterRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...

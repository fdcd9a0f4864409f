"""Shared fixtures for unit tests."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

FIXED_NOW = datetime(2026, 10, 17, 12, 0, 0)


async def _echo(entity: Any) -> Any:
    return entity


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing.

    Create methods echo their argument back; lookups find nothing.
    """

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.profiles = AsyncMock()
        self.invites = AsyncMock()
        self.group_memberships = AsyncMock()
        self.filters = AsyncMock()

        self.users.get_by_email.return_value = None
        self.users.create.side_effect = _echo
        self.profiles.create.side_effect = _echo
        self.invites.get_by_code.return_value = None
        self.group_memberships.create.side_effect = _echo
        self.group_memberships.count_by_invite.return_value = 0
        self.filters.create_many.side_effect = _echo

        self.commit_count = 0
        self.rolled_back = False

    @property
    def committed(self) -> bool:
        return self.commit_count > 0

    async def commit(self) -> None:
        self.commit_count += 1

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type:
            await self.rollback()


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def email_sender() -> AsyncMock:
    """An email sender that reports successful delivery."""
    sender = AsyncMock()
    sender.send_confirmation_email.return_value = True
    return sender


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()

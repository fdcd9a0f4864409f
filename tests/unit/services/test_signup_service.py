"""Unit tests for SignupService."""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from structlog.testing import capture_logs

from core.exceptions import InvalidEmailError, InvalidUsernameError, UserExistsError
from domain.entities.filter import DEFAULT_FILTERS
from domain.entities.group import Group, Invite
from domain.entities.profile import Profile
from domain.entities.user import AuthProvider, User, UserStatus
from domain.services.signup_service import CreateUserInput, SignupService
from tests.unit.conftest import FIXED_NOW, FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork, email_sender: AsyncMock) -> SignupService:
    return SignupService(lambda: uow, email_sender=email_sender, clock=lambda: FIXED_NOW)


def _input(**overrides: object) -> CreateUserInput:
    values: dict = {
        "provider": AuthProvider.EMAIL,
        "email": "jane@example.com",
        "username": "jane_doe",
        "name": "Jane Doe",
        "password": "$2b$10$hashedpassword",
    }
    values.update(overrides)
    return CreateUserInput(**values)


def _invite(max_members: int = 5, expires_in: timedelta = timedelta(days=1)) -> Invite:
    owner_id = uuid4()
    group = Group(name="Readers", created_by_id=owner_id)
    return Invite(
        code="READERS",
        group_id=group.id,
        group=group,
        created_by_id=owner_id,
        expiration_time=FIXED_NOW + expires_in,
        max_members=max_members,
    )


# --- new accounts ---


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_creates_active_user_and_profile(
        self, service: SignupService, uow: FakeUnitOfWork, email_sender: AsyncMock
    ) -> None:
        user, profile = await service.create_user(_input())

        assert user.status == UserStatus.ACTIVE
        assert user.email == "jane@example.com"
        assert user.source == AuthProvider.EMAIL
        assert user.password == "$2b$10$hashedpassword"
        assert profile.user_id == user.id
        assert profile.username == "jane_doe"
        assert user.profile is profile
        assert uow.commit_count == 1
        email_sender.send_confirmation_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_trims_email(self, service: SignupService, uow: FakeUnitOfWork) -> None:
        user, _ = await service.create_user(_input(email="  jane@example.com \n"))

        assert user.email == "jane@example.com"
        uow.users.get_by_email.assert_called_once_with("jane@example.com")

    @pytest.mark.asyncio
    async def test_oauth_identity_is_stored(self, service: SignupService) -> None:
        user, _ = await service.create_user(
            _input(provider=AuthProvider.GOOGLE, source_user_id="google-123", password=None)
        )

        assert user.source == AuthProvider.GOOGLE
        assert user.source_user_id == "google-123"
        assert user.password is None

    @pytest.mark.asyncio
    async def test_seeds_default_filters_in_order(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        user, _ = await service.create_user(_input())

        uow.filters.create_many.assert_called_once()
        filters = uow.filters.create_many.call_args.args[0]
        assert len(filters) == 8
        assert [(f.name, f.filter) for f in filters] == list(DEFAULT_FILTERS)
        assert [f.position for f in filters] == list(range(8))
        assert all(f.user_id == user.id for f in filters)
        assert all(f.default_filter and f.category == "Search" for f in filters)

    @pytest.mark.asyncio
    async def test_no_invite_code_skips_invite_lookup(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        await service.create_user(_input())

        uow.invites.get_by_code.assert_not_called()
        uow.group_memberships.create.assert_not_called()


# --- existing accounts ---


class TestExistingUser:
    @pytest.mark.asyncio
    async def test_raises_user_exists_when_profile_present(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        existing = User(email="User@Foo.com", name="Existing")
        existing.profile = Profile(user_id=existing.id, username="existing")
        uow.users.get_by_email.return_value = existing

        with pytest.raises(UserExistsError) as exc_info:
            await service.create_user(_input(email="user@foo.com"))

        assert exc_info.value.status_code == 409
        uow.users.create.assert_not_called()
        uow.profiles.create.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_attaches_profile_when_missing(
        self, service: SignupService, uow: FakeUnitOfWork, email_sender: AsyncMock
    ) -> None:
        existing = User(email="jane@example.com", name="Jane", status=UserStatus.PENDING)
        uow.users.get_by_email.return_value = existing

        user, profile = await service.create_user(
            _input(invite_code="READERS", pending_confirmation=True, bio="hello")
        )

        assert user is existing
        assert profile.user_id == existing.id
        assert profile.bio == "hello"
        assert user.profile is profile
        assert uow.commit_count == 1
        uow.users.create.assert_not_called()
        uow.invites.get_by_code.assert_not_called()
        uow.filters.create_many.assert_not_called()
        email_sender.send_confirmation_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_attach_path_does_not_apply_username_policy(
        self, uow: FakeUnitOfWork, email_sender: AsyncMock
    ) -> None:
        validator = MagicMock(return_value=False)
        service = SignupService(lambda: uow, email_sender=email_sender, username_validator=validator)
        uow.users.get_by_email.return_value = User(email="jane@example.com", name="Jane")

        await service.create_user(_input())

        validator.assert_not_called()


# --- username policy ---


class TestUsernamePolicy:
    @pytest.mark.asyncio
    async def test_invalid_username_raises_before_any_write(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        with pytest.raises(InvalidUsernameError) as exc_info:
            await service.create_user(_input(username="Bad Name!"))

        assert exc_info.value.details == {"username": "Bad Name!"}
        uow.users.create.assert_not_called()
        uow.profiles.create.assert_not_called()
        uow.filters.create_many.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_uses_injected_validator(
        self, uow: FakeUnitOfWork, email_sender: AsyncMock
    ) -> None:
        seen: list[str] = []

        def reject_all(username: str) -> bool:
            seen.append(username)
            return False

        service = SignupService(lambda: uow, email_sender=email_sender, username_validator=reject_all)

        with pytest.raises(InvalidUsernameError):
            await service.create_user(_input())

        assert seen == ["jane_doe"]


# --- invites ---


class TestInvites:
    @pytest.mark.asyncio
    async def test_valid_invite_creates_membership(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        invite = _invite(max_members=2)
        uow.invites.get_by_code.return_value = invite
        uow.group_memberships.count_by_invite.return_value = 1

        with capture_logs() as logs:
            user, _ = await service.create_user(_input(invite_code="READERS"))

        uow.invites.get_by_code.assert_called_once_with("READERS")
        uow.group_memberships.count_by_invite.assert_called_once_with(invite.id)
        uow.group_memberships.create.assert_called_once()
        membership = uow.group_memberships.create.call_args.args[0]
        assert membership.user_id == user.id
        assert membership.group_id == invite.group_id
        assert membership.invite_id == invite.id
        assert any(log["event"] == "group_membership_created" for log in logs)

    @pytest.mark.asyncio
    async def test_full_invite_is_rejected_without_failing_signup(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        invite = _invite(max_members=2)
        uow.invites.get_by_code.return_value = invite
        uow.group_memberships.count_by_invite.return_value = 2

        with capture_logs() as logs:
            user, profile = await service.create_user(_input(invite_code="READERS"))

        assert user.status == UserStatus.ACTIVE
        assert profile.username == "jane_doe"
        uow.group_memberships.create.assert_not_called()
        uow.filters.create_many.assert_called_once()
        rejected = [log for log in logs if log["event"] == "invite_rejected_full"]
        assert len(rejected) == 1
        assert rejected[0]["member_count"] == 2
        assert rejected[0]["max_members"] == 2

    @pytest.mark.asyncio
    async def test_expired_invite_is_rejected_without_failing_signup(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        uow.invites.get_by_code.return_value = _invite(expires_in=-timedelta(minutes=1))

        with capture_logs() as logs:
            await service.create_user(_input(invite_code="READERS"))

        uow.group_memberships.count_by_invite.assert_not_called()
        uow.group_memberships.create.assert_not_called()
        assert uow.commit_count == 1
        assert [log["event"] for log in logs].count("invite_rejected_expired") == 1

    @pytest.mark.asyncio
    async def test_invite_expiring_now_is_rejected(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        uow.invites.get_by_code.return_value = _invite(expires_in=timedelta(0))

        await service.create_user(_input(invite_code="READERS"))

        uow.group_memberships.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_invite_code_is_ignored(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        with capture_logs() as logs:
            await service.create_user(_input(invite_code="NOPE"))

        uow.group_memberships.create.assert_not_called()
        assert any(log["event"] == "invite_not_found" for log in logs)


# --- confirmation email ---


class TestPendingConfirmation:
    @pytest.mark.asyncio
    async def test_pending_signup_sends_one_confirmation_email(
        self, service: SignupService, email_sender: AsyncMock
    ) -> None:
        user, _ = await service.create_user(_input(pending_confirmation=True))

        assert user.status == UserStatus.PENDING
        email_sender.send_confirmation_email.assert_called_once_with(user)

    @pytest.mark.asyncio
    async def test_email_failure_raises_after_commit(
        self, service: SignupService, uow: FakeUnitOfWork, email_sender: AsyncMock
    ) -> None:
        email_sender.send_confirmation_email.return_value = False

        with pytest.raises(InvalidEmailError) as exc_info:
            await service.create_user(_input(pending_confirmation=True))

        assert exc_info.value.details == {"email": "jane@example.com"}
        assert uow.commit_count == 1
        assert not uow.rolled_back
        email_sender.send_confirmation_email.assert_called_once()


# --- transaction ---


class TestTransaction:
    @pytest.mark.asyncio
    async def test_filter_failure_rolls_back_and_propagates(
        self, service: SignupService, uow: FakeUnitOfWork, email_sender: AsyncMock
    ) -> None:
        uow.filters.create_many.side_effect = RuntimeError("insert failed")

        with pytest.raises(RuntimeError, match="insert failed"):
            await service.create_user(_input(pending_confirmation=True))

        assert not uow.committed
        assert uow.rolled_back
        email_sender.send_confirmation_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_helpers_receive_the_active_unit_of_work(
        self, email_sender: AsyncMock
    ) -> None:
        first, second = FakeUnitOfWork(), FakeUnitOfWork()
        units = iter([first, second])
        service = SignupService(lambda: next(units), email_sender=email_sender, clock=lambda: FIXED_NOW)
        second.invites.get_by_code.return_value = _invite()

        await service.create_user(_input(invite_code="READERS"))

        first.users.get_by_email.assert_called_once()
        assert not first.committed
        second.group_memberships.count_by_invite.assert_called_once()
        second.filters.create_many.assert_called_once()
        assert second.commit_count == 1


class TestGetUserByEmail:
    @pytest.mark.asyncio
    async def test_delegates_trimmed_email(
        self, service: SignupService, uow: FakeUnitOfWork
    ) -> None:
        existing = User(email="jane@example.com", name="Jane")
        uow.users.get_by_email.return_value = existing

        assert await service.get_user_by_email(" JANE@example.com ") is existing
        uow.users.get_by_email.assert_called_once_with("JANE@example.com")

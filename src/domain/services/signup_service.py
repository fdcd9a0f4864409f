"""Signup service: account creation, invite redemption and default filters."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

import structlog

from core.exceptions import InvalidEmailError, InvalidUsernameError, UserExistsError
from domain.entities.filter import Filter, build_default_filters
from domain.entities.group import GroupMembership, Invite
from domain.entities.profile import Profile
from domain.entities.user import AuthProvider, User, UserStatus
from domain.policies.username import validate_username
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.email_sender import IEmailSender

logger = structlog.get_logger()


@dataclass
class CreateUserInput:
    """Signup credentials or an OAuth identity."""

    provider: AuthProvider
    email: str
    username: str
    name: str
    source_user_id: str | None = None
    picture_url: str | None = None
    bio: str | None = None
    invite_code: str | None = None
    password: str | None = None
    pending_confirmation: bool = False


class SignupService:
    """Service layer for user signup."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        email_sender: IEmailSender,
        username_validator: Callable[[str], bool] = validate_username,
        clock: Callable[[], datetime] = datetime.utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._email_sender = email_sender
        self._validate_username = username_validator
        self._clock = clock

    async def create_user(self, data: CreateUserInput) -> tuple[User, Profile]:
        """Create a user and profile, or complete a user that has no profile.

        Args:
            data: The signup input.

        Returns:
            Tuple of (User, Profile).

        Raises:
            UserExistsError: If the email belongs to a user with a profile.
            InvalidUsernameError: If the username fails the username policy.
            InvalidEmailError: If the confirmation email could not be sent.
                The user and profile are already committed at that point.
        """
        email = data.email.strip()

        async with self._uow_factory() as uow:
            existing = await uow.users.get_by_email(email)
            if existing:
                if existing.profile:
                    raise UserExistsError(email)

                profile = await uow.profiles.create(
                    Profile(
                        user_id=existing.id,
                        username=data.username,
                        picture_url=data.picture_url,
                        bio=data.bio,
                    )
                )
                await uow.commit()
                existing.profile = profile
                logger.info(
                    "profile_attached_to_existing_user",
                    user_id=str(existing.id),
                    profile_id=str(profile.id),
                )
                return existing, profile

        if not self._validate_username(data.username):
            raise InvalidUsernameError(data.username)

        async with self._uow_factory() as uow:
            invite: Invite | None = None
            if data.invite_code:
                invite = await uow.invites.get_by_code(data.invite_code)
                if not invite:
                    logger.info("invite_not_found", invite_code=data.invite_code)
                elif not await self._validate_invite(uow, invite):
                    invite = None

            user = await uow.users.create(
                User(
                    source=data.provider,
                    source_user_id=data.source_user_id,
                    email=email,
                    name=data.name,
                    password=data.password,
                    status=(
                        UserStatus.PENDING if data.pending_confirmation else UserStatus.ACTIVE
                    ),
                )
            )
            profile = await uow.profiles.create(
                Profile(
                    user_id=user.id,
                    username=data.username,
                    picture_url=data.picture_url,
                    bio=data.bio,
                )
            )

            if invite:
                await uow.group_memberships.create(
                    GroupMembership(
                        user_id=user.id,
                        group_id=invite.group_id,
                        invite_id=invite.id,
                    )
                )
                logger.info(
                    "group_membership_created",
                    user_id=str(user.id),
                    group_id=str(invite.group_id),
                    invite_id=str(invite.id),
                )

            await self._create_default_filters(uow, user)

            await uow.commit()

        user.profile = profile
        logger.info(
            "user_created",
            user_id=str(user.id),
            provider=user.source.value,
            status=user.status.value,
        )

        if user.is_pending:
            if not await self._email_sender.send_confirmation_email(user):
                raise InvalidEmailError(email)

        return user, profile

    async def get_user_by_email(self, email: str) -> User | None:
        """Find a user by email, ignoring case, with its profile loaded."""
        async with self._uow_factory() as uow:
            return await uow.users.get_by_email(email.strip())

    # --- Internal helpers ---

    async def _validate_invite(self, uow: IUnitOfWork, invite: Invite) -> bool:
        """Check expiry and capacity. Rejections are logged, never raised."""
        if invite.is_expired(self._clock()):
            logger.info(
                "invite_rejected_expired",
                invite_id=str(invite.id),
                invite_code=invite.code,
                expiration_time=invite.expiration_time.isoformat(),
            )
            return False

        member_count = await uow.group_memberships.count_by_invite(invite.id)
        if not invite.has_capacity(member_count):
            logger.info(
                "invite_rejected_full",
                invite_id=str(invite.id),
                invite_code=invite.code,
                member_count=member_count,
                max_members=invite.max_members,
            )
            return False

        return True

    async def _create_default_filters(self, uow: IUnitOfWork, user: User) -> list[Filter]:
        """Seed the default saved searches for a new user."""
        return await uow.filters.create_many(build_default_filters(user.id))

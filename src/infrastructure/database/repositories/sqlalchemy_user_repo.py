"""SQLAlchemy implementation of User and Profile repositories."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from domain.entities.profile import Profile
from domain.entities.user import AuthProvider, User, UserStatus
from infrastructure.database.models import ProfileModel, UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case, with its profile loaded."""
        stmt = (
            select(UserModel)
            .options(joinedload(UserModel.profile))
            .where(func.lower(UserModel.email) == func.lower(email))
        )
        result = await self._session.execute(stmt)
        model = result.unique().scalar_one_or_none()
        if not model:
            return None

        user = self._to_entity(model)
        if model.profile:
            user.profile = SQLAlchemyProfileRepository.to_entity(model.profile)
        return user

    async def create(self, user: User) -> User:
        """Create a new user."""
        model = self._to_model(user)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            source=AuthProvider(model.source),
            source_user_id=model.source_user_id,
            email=model.email,
            name=model.name,
            password=model.password,
            status=UserStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: User) -> UserModel:
        """Convert domain entity to ORM model."""
        return UserModel(
            id=entity.id,
            source=entity.source.value,
            source_user_id=entity.source_user_id,
            email=entity.email,
            name=entity.name,
            password=entity.password,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, profile: Profile) -> Profile:
        """Create a profile for an existing user."""
        model = ProfileModel(
            id=profile.id,
            user_id=profile.user_id,
            username=profile.username,
            picture_url=profile.picture_url,
            bio=profile.bio,
            private=profile.private,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self.to_entity(model)

    @staticmethod
    def to_entity(model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            username=model.username,
            picture_url=model.picture_url,
            bio=model.bio,
            private=model.private,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

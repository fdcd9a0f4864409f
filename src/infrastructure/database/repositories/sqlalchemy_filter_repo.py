"""SQLAlchemy implementation of Filter repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.filter import Filter
from infrastructure.database.models import FilterModel


class SQLAlchemyFilterRepository:
    """SQLAlchemy implementation of IFilterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_many(self, filters: list[Filter]) -> list[Filter]:
        """Create several filters in a single flush."""
        models = [self._to_model(f) for f in filters]
        self._session.add_all(models)
        await self._session.flush()
        return [self._to_entity(model) for model in models]

    async def get_for_user(self, user_id: UUID) -> list[Filter]:
        """Get a user's filters ordered by position."""
        stmt = (
            select(FilterModel)
            .where(FilterModel.user_id == user_id)
            .order_by(FilterModel.position)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: FilterModel) -> Filter:
        """Convert ORM model to domain entity."""
        return Filter(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            description=model.description,
            filter=model.filter,
            category=model.category,
            position=model.position,
            folder=model.folder,
            default_filter=model.default_filter,
            visible=model.visible,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Filter) -> FilterModel:
        """Convert domain entity to ORM model."""
        return FilterModel(
            id=entity.id,
            user_id=entity.user_id,
            name=entity.name,
            description=entity.description,
            filter=entity.filter,
            category=entity.category,
            position=entity.position,
            folder=entity.folder,
            default_filter=entity.default_filter,
            visible=entity.visible,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

"""SQLAlchemy implementation of Invite and GroupMembership repositories."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from domain.entities.group import Group, GroupMembership, Invite
from infrastructure.database.models import GroupMembershipModel, GroupModel, InviteModel


class SQLAlchemyInviteRepository:
    """SQLAlchemy implementation of IInviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_code(self, code: str) -> Invite | None:
        """Get an invite by its code, with its group loaded."""
        stmt = (
            select(InviteModel)
            .options(joinedload(InviteModel.group))
            .where(InviteModel.code == code)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    def _to_entity(self, model: InviteModel) -> Invite:
        """Convert ORM model to domain entity."""
        return Invite(
            id=model.id,
            code=model.code,
            group_id=model.group_id,
            created_by_id=model.created_by_id,
            max_members=model.max_members,
            expiration_time=model.expiration_time,
            created_at=model.created_at,
            group=self._group_to_entity(model.group),
        )

    def _group_to_entity(self, model: GroupModel) -> Group:
        """Convert group ORM model to domain entity."""
        return Group(
            id=model.id,
            name=model.name,
            created_by_id=model.created_by_id,
            created_at=model.created_at,
        )


class SQLAlchemyGroupMembershipRepository:
    """SQLAlchemy implementation of IGroupMembershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, membership: GroupMembership) -> GroupMembership:
        """Create a group membership."""
        model = GroupMembershipModel(
            id=membership.id,
            user_id=membership.user_id,
            group_id=membership.group_id,
            invite_id=membership.invite_id,
            created_at=membership.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def count_by_invite(self, invite_id: UUID) -> int:
        """Count memberships granted through an invite."""
        stmt = (
            select(func.count())
            .select_from(GroupMembershipModel)
            .where(GroupMembershipModel.invite_id == invite_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _to_entity(self, model: GroupMembershipModel) -> GroupMembership:
        """Convert ORM model to domain entity."""
        return GroupMembership(
            id=model.id,
            user_id=model.user_id,
            group_id=model.group_id,
            invite_id=model.invite_id,
            created_at=model.created_at,
        )

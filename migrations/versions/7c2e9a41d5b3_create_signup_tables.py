"""create_signup_tables

Revision ID: 7c2e9a41d5b3
Revises:
Create Date: 2026-10-17 09:12:44.318402

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c2e9a41d5b3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, profiles, groups, invites, group_memberships and filters."""
    op.create_table('users',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('source', sa.String(length=20), nullable=False),
        sa.Column('source_user_id', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='ACTIVE'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint("source IN ('EMAIL', 'GOOGLE', 'APPLE')", name='ck_users_source'),
        sa.CheckConstraint("status IN ('PENDING', 'ACTIVE')", name='ck_users_status'),
        sa.PrimaryKeyConstraint('id'),
    )
    # Case-insensitive email uniqueness
    op.create_index('ix_users_email_lower', 'users', [sa.text('lower(email)')], unique=True)

    op.create_table('profiles',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('picture_url', sa.Text(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('private', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
        sa.UniqueConstraint('username'),
    )

    op.create_table('groups',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_by_id', sa.UUID(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('invites',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('code', sa.String(length=255), nullable=False),
        sa.Column('group_id', sa.UUID(), nullable=False),
        sa.Column('created_by_id', sa.UUID(), nullable=False),
        sa.Column('max_members', sa.Integer(), nullable=False),
        sa.Column('expiration_time', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )
    op.create_index('ix_invites_group_id', 'invites', ['group_id'], unique=False)

    op.create_table('group_memberships',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('group_id', sa.UUID(), nullable=False),
        sa.Column('invite_id', sa.UUID(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['group_id'], ['groups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['invite_id'], ['invites.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'group_id'),
    )
    op.create_index('ix_group_memberships_user_id', 'group_memberships', ['user_id'], unique=False)
    # Capacity checks count memberships per invite
    op.create_index('ix_group_memberships_invite_id', 'group_memberships', ['invite_id'], unique=False)

    op.create_table('filters',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('filter', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False, server_default='Search'),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('folder', sa.String(length=255), nullable=True),
        sa.Column('default_filter', sa.Boolean(), nullable=True),
        sa.Column('visible', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'name'),
    )
    op.create_index('ix_filters_user_id', 'filters', ['user_id'], unique=False)


def downgrade() -> None:
    """Drop the signup tables."""
    op.drop_index('ix_filters_user_id', table_name='filters')
    op.drop_table('filters')
    op.drop_index('ix_group_memberships_invite_id', table_name='group_memberships')
    op.drop_index('ix_group_memberships_user_id', table_name='group_memberships')
    op.drop_table('group_memberships')
    op.drop_index('ix_invites_group_id', table_name='invites')
    op.drop_table('invites')
    op.drop_table('groups')
    op.drop_table('profiles')
    op.drop_index('ix_users_email_lower', table_name='users')
    op.drop_table('users')

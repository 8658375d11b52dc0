"""Initial schema for podcasts, episodes and users

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('Host', 'Listener', name='user_role')


def upgrade() -> None:
    # Create podcasts table
    op.create_table(
        'podcasts',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(512), nullable=False),
        sa.Column('category', sa.String(256), nullable=False),
        sa.Column('rating', sa.Integer, nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )
    op.create_index('ix_podcasts_category', 'podcasts', ['category'])

    # Create episodes table
    op.create_table(
        'episodes',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            'podcast_id',
            sa.Integer,
            sa.ForeignKey('podcasts.id', ondelete='CASCADE'),
            nullable=False
        ),
        sa.Column('title', sa.String(512), nullable=False),
        sa.Column('category', sa.String(256), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )
    op.create_index('ix_episodes_podcast_id', 'episodes', ['podcast_id'])

    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(256), unique=True, nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('verified', sa.Boolean, nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime, nullable=True),
        sa.Column('updated_at', sa.DateTime, nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'])


def downgrade() -> None:
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    user_role.drop(op.get_bind(), checkfirst=True)

    op.drop_index('ix_episodes_podcast_id', table_name='episodes')
    op.drop_table('episodes')

    op.drop_index('ix_podcasts_category', table_name='podcasts')
    op.drop_table('podcasts')

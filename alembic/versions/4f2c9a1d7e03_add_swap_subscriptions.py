"""add swap subscriptions

Revision ID: 4f2c9a1d7e03
Revises:
Create Date: 2026-10-18 10:12:41.503117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f2c9a1d7e03'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'swap_subscription',
        sa.Column('wallet_address', sa.String(66), nullable=False),
        sa.Column('to_token', sa.String(66), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('wallet_address', name='pk_swap_subscription'),
    )

    # allocation rows cannot outlive their subscription
    op.create_table(
        'swap_subscription_from_token',
        sa.Column('wallet_address', sa.String(66), nullable=False),
        sa.Column('from_token', sa.String(66), nullable=False),
        sa.Column('percentage', sa.SmallInteger(), nullable=False),
        sa.PrimaryKeyConstraint('wallet_address', 'from_token', name='pk_swap_subscription_from_token'),
        sa.ForeignKeyConstraint(
            ['wallet_address'], ['swap_subscription.wallet_address'],
            name='fk_swap_subscription_from_token_wallet_address_swap_subscription',
            ondelete='CASCADE',
        ),
        sa.CheckConstraint(
            'percentage >= 0 AND percentage <= 100',
            name='ck_swap_subscription_from_token_percentage_range',
        ),
    )


def downgrade() -> None:
    op.drop_table('swap_subscription_from_token')
    op.drop_table('swap_subscription')

"""create foods table

Revision ID: 3f1c9a7d2b64
Revises: 
Create Date: 2026-10-05 11:30:12.481907

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b64'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


restaurant_status_enum = sa.Enum('open', 'closed', name='restaurantstatus')


def upgrade() -> None:
    op.create_table(
        'foods',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('food_image', sa.Text(), nullable=True),
        sa.Column('restaurant_name', sa.Text(), nullable=True),
        sa.Column('restaurant_image', sa.Text(), nullable=True),
        sa.Column('restaurant_status', restaurant_status_enum,
                  nullable=False, server_default='open'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_foods_id'), 'foods', ['id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_foods_id'), table_name='foods')
    op.drop_table('foods')
    # PostgreSQL keeps the enum type around after the table is gone
    restaurant_status_enum.drop(op.get_bind(), checkfirst=True)

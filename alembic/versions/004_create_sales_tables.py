"""Create sales and sale_details tables

Revision ID: 004
Revises: 003
Create Date: 2024-01-14 00:00:03.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '004'
down_revision: Union[str, None] = '003'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'sales',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('sale_date', sa.Date(), nullable=False),
        sa.Column('total_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('status_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['status_id'], ['sale_statuses.id'],
            onupdate='CASCADE', ondelete='RESTRICT',
        ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_sales_sale_date'), 'sales', ['sale_date'], unique=False)
    op.create_index(op.f('ix_sales_status_id'), 'sales', ['status_id'], unique=False)

    op.create_table(
        'sale_details',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('sale_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('product_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('subtotal', sa.Numeric(12, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['sale_id'], ['sales.id'],
            onupdate='CASCADE', ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['product_id'], ['products.id'],
            onupdate='CASCADE', ondelete='RESTRICT',
        ),
        sa.CheckConstraint('quantity >= 1', name='ck_sale_details_quantity_positive'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_sale_details_sale_id'), 'sale_details', ['sale_id'], unique=False)
    op.create_index(op.f('ix_sale_details_product_id'), 'sale_details', ['product_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_sale_details_product_id'), table_name='sale_details')
    op.drop_index(op.f('ix_sale_details_sale_id'), table_name='sale_details')
    op.drop_table('sale_details')
    op.drop_index(op.f('ix_sales_status_id'), table_name='sales')
    op.drop_index(op.f('ix_sales_sale_date'), table_name='sales')
    op.drop_table('sales')

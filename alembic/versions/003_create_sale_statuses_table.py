"""Create sale_statuses table and seed master data

Revision ID: 003
Revises: 002
Create Date: 2024-01-14 00:00:02.000000

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '003'
down_revision: Union[str, None] = '002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    sale_statuses = op.create_table(
        'sale_statuses',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('name', sa.String(256), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_sale_statuses_code'), 'sale_statuses', ['code'], unique=True)

    op.bulk_insert(
        sale_statuses,
        [
            {'id': uuid.uuid4(), 'code': 'PENDING', 'name': 'Pending',
             'description': 'Sale created, awaiting processing'},
            {'id': uuid.uuid4(), 'code': 'COMPLETED', 'name': 'Completed',
             'description': 'Sale fulfilled'},
            {'id': uuid.uuid4(), 'code': 'PAID', 'name': 'Paid',
             'description': 'Sale paid'},
            {'id': uuid.uuid4(), 'code': 'CANCELLED', 'name': 'Cancelled',
             'description': 'Sale cancelled'},
        ],
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_sale_statuses_code'), table_name='sale_statuses')
    op.drop_table('sale_statuses')

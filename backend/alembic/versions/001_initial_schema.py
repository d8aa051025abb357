"""Initial schema - pet stores, employees, customers

Revision ID: 001
Revises:
Create Date: 2026-10-19

WHY: Creates the three entity tables and the store/customer association
table backing the patron relationship.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade() -> None:
    """Create pet_store, employee, customer and pet_store_customer."""
    op.create_table(
        'pet_store',
        sa.Column('pet_store_id', sa.Integer(), nullable=False),
        sa.Column('pet_store_name', sa.String(length=255), nullable=True),
        sa.Column('pet_store_address', sa.String(length=255), nullable=True),
        sa.Column('pet_store_city', sa.String(length=128), nullable=True),
        sa.Column('pet_store_state', sa.String(length=128), nullable=True),
        sa.Column('pet_store_zip', sa.String(length=20), nullable=True),
        sa.Column('pet_store_phone', sa.String(length=40), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('pet_store_id')
    )
    op.create_index('ix_pet_store_pet_store_id', 'pet_store', ['pet_store_id'])

    op.create_table(
        'employee',
        sa.Column('employee_id', sa.Integer(), nullable=False),
        sa.Column('pet_store_id', sa.Integer(), nullable=False),
        sa.Column('employee_first_name', sa.String(length=128), nullable=True),
        sa.Column('employee_last_name', sa.String(length=128), nullable=True),
        sa.Column('employee_phone', sa.String(length=40), nullable=True),
        sa.Column('employee_job_title', sa.String(length=128), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['pet_store_id'], ['pet_store.pet_store_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('employee_id')
    )
    op.create_index('ix_employee_employee_id', 'employee', ['employee_id'])
    op.create_index('ix_employee_pet_store_id', 'employee', ['pet_store_id'])

    op.create_table(
        'customer',
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('customer_first_name', sa.String(length=128), nullable=True),
        sa.Column('customer_last_name', sa.String(length=128), nullable=True),
        sa.Column('customer_email', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('customer_id')
    )
    op.create_index('ix_customer_customer_id', 'customer', ['customer_id'])

    # Patron relationship
    # WHY: Composite primary key makes each store/customer edge unique
    op.create_table(
        'pet_store_customer',
        sa.Column('pet_store_id', sa.Integer(), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['pet_store_id'], ['pet_store.pet_store_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['customer_id'], ['customer.customer_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('pet_store_id', 'customer_id')
    )


def downgrade() -> None:
    """Drop all pet store tables."""
    op.drop_table('pet_store_customer')
    op.drop_index('ix_customer_customer_id', table_name='customer')
    op.drop_table('customer')
    op.drop_index('ix_employee_pet_store_id', table_name='employee')
    op.drop_index('ix_employee_employee_id', table_name='employee')
    op.drop_table('employee')
    op.drop_index('ix_pet_store_pet_store_id', table_name='pet_store')
    op.drop_table('pet_store')

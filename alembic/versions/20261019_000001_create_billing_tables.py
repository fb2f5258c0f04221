"""Create billing tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Creates clients, invoices, invoice_items and payments. Every table carries
the soft-delete columns; rows are never physically deleted by the service.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

INVOICE_STATUSES = ('Draft', 'Sent', 'Overdue', 'PartiallyPaid', 'Paid', 'Cancelled', 'Disputed')
PAYMENT_METHODS = ('BankTransfer', 'CreditCard', 'Cash', 'Check', 'PayPal', 'Other')


def _audit_columns():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
    ]


def upgrade() -> None:
    """Create the billing tables."""
    op.create_table(
        'clients',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('email', sa.String(200), nullable=False),
        sa.Column('company_name', sa.String(200), nullable=True),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('phone_number', sa.String(20), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'invoices',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('client_id', sa.Uuid(), nullable=False),
        sa.Column('invoice_number', sa.String(50), nullable=False),
        sa.Column('issue_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('currency', sa.String(3), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('notes', sa.String(1000), nullable=True),
        sa.Column(
            'status',
            sa.Enum(*INVOICE_STATUSES, name='invoice_status', length=20, create_constraint=True),
            nullable=False,
            server_default='Draft'
        ),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['client_id'], ['clients.id'], name='fk_invoices_client_id'),
    )

    op.create_table(
        'invoice_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('invoice_id', sa.Uuid(), nullable=False),
        sa.Column('description', sa.String(500), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('tax_rate', sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column('total', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['invoice_id'], ['invoices.id'], name='fk_invoice_items_invoice_id'),
    )

    op.create_table(
        'payments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('invoice_id', sa.Uuid(), nullable=False),
        sa.Column('amount_paid', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('payment_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            'payment_method',
            sa.Enum(*PAYMENT_METHODS, name='payment_method', length=100, create_constraint=True),
            nullable=False
        ),
        sa.Column('reference_number', sa.String(100), nullable=True),
        sa.Column('notes', sa.String(1000), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['invoice_id'], ['invoices.id'], name='fk_payments_invoice_id'),
    )

    # Create indexes for common queries
    op.create_index('ix_invoices_client_id', 'invoices', ['client_id'])
    op.create_index('ix_invoices_status', 'invoices', ['status'])
    op.create_index('ix_invoice_items_invoice_id', 'invoice_items', ['invoice_id'])
    op.create_index('ix_payments_invoice_id', 'payments', ['invoice_id'])
    for table in ('clients', 'invoices', 'invoice_items', 'payments'):
        op.create_index(f'ix_{table}_is_deleted', table, ['is_deleted'])


def downgrade() -> None:
    """Drop the billing tables."""
    for table in ('payments', 'invoice_items', 'invoices', 'clients'):
        op.drop_index(f'ix_{table}_is_deleted', table_name=table)
    op.drop_index('ix_payments_invoice_id', table_name='payments')
    op.drop_index('ix_invoice_items_invoice_id', table_name='invoice_items')
    op.drop_index('ix_invoices_status', table_name='invoices')
    op.drop_index('ix_invoices_client_id', table_name='invoices')
    op.drop_table('payments')
    op.drop_table('invoice_items')
    op.drop_table('invoices')
    op.drop_table('clients')

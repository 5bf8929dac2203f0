"""initial_crm_schema

Revision ID: 5b1e0c7d2a94
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e0c7d2a94'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """
    Create the CRM schema.

    Creates:
    - principals, users (profiles), companies
    - tenant-scoped tables: accounts, contacts, products,
      account_products, shipping_locations, call_notes

    company_id is nullable on tenant-scoped tables: rows imported from
    before tenant scoping are stamped later by the admin backfill.
    """
    # 1. Identity and tenancy
    op.create_table(
        'principals',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('display_name', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_principals_email', 'principals', ['email'], unique=True)

    op.create_table(
        'companies',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('owner_id', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_companies_owner_id', 'companies', ['owner_id'])

    op.create_table(
        'users',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('display_name', sa.String(length=255), nullable=False),
        sa.Column('company_id', sa.String(length=64), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_company_id', 'users', ['company_id'])

    # 2. Accounts and their records
    op.create_table(
        'accounts',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('company_id', sa.String(length=64), nullable=True),
        sa.Column('account_number', sa.String(length=100), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('industry', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=11), nullable=False),
        sa.Column('details', sa.Text(), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_accounts_company_id', 'accounts', ['company_id'])
    op.create_index('ix_accounts_company_number', 'accounts', ['company_id', 'account_number'])

    op.create_table(
        'contacts',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('company_id', sa.String(length=64), nullable=True),
        sa.Column('account_number', sa.String(length=100), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('is_main_contact', sa.Boolean(), nullable=False),
        sa.Column('avatar_url', sa.String(length=1000), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_contacts_company_id', 'contacts', ['company_id'])
    op.create_index('ix_contacts_company_account_number', 'contacts', ['company_id', 'account_number'])

    op.create_table(
        'products',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('company_id', sa.String(length=64), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('product_number', sa.String(length=100), nullable=False),
        sa.Column('attributes', sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_products_company_id', 'products', ['company_id'])

    op.create_table(
        'account_products',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('company_id', sa.String(length=64), nullable=True),
        sa.Column('account_id', sa.String(length=64), nullable=False),
        sa.Column('product_id', sa.String(length=64), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.Column('price_type', sa.String(length=4), nullable=True),
        sa.Column('bid_frequency', sa.String(length=9), nullable=True),
        sa.Column('last_bid_price', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('winning_bid_price', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('type', sa.String(length=9), nullable=True),
        sa.Column('price', sa.Numeric(precision=15, scale=2), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_account_products_company_id', 'account_products', ['company_id'])
    op.create_index('ix_account_products_account_id', 'account_products', ['account_id'])
    op.create_index('ix_account_products_product_id', 'account_products', ['product_id'])

    op.create_table(
        'shipping_locations',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('company_id', sa.String(length=64), nullable=True),
        sa.Column('original_account_id', sa.String(length=64), nullable=False),
        sa.Column('related_account_id', sa.String(length=64), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['original_account_id'], ['accounts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['related_account_id'], ['accounts.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_shipping_locations_company_id', 'shipping_locations', ['company_id'])
    op.create_index('ix_shipping_locations_original_account_id', 'shipping_locations', ['original_account_id'])
    op.create_index('ix_shipping_locations_related_account_id', 'shipping_locations', ['related_account_id'])

    op.create_table(
        'call_notes',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('company_id', sa.String(length=64), nullable=True),
        sa.Column('account_id', sa.String(length=64), nullable=False),
        sa.Column('call_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('note', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_call_notes_company_id', 'call_notes', ['company_id'])
    op.create_index('ix_call_notes_account_id', 'call_notes', ['account_id'])
    op.create_index('ix_call_notes_account_date', 'call_notes', ['account_id', 'call_date'])


def downgrade() -> None:
    """
    Drop the CRM schema.

    WARNING: This deletes all CRM data.
    """
    op.drop_table('call_notes')
    op.drop_table('shipping_locations')
    op.drop_table('account_products')
    op.drop_table('products')
    op.drop_table('contacts')
    op.drop_table('accounts')
    op.drop_table('users')
    op.drop_table('companies')
    op.drop_table('principals')

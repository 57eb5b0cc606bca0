"""Create account, contact and cash flow tables

Revision ID: 3c1f0b7e9a42
Revises:
Create Date: 2026-10-18 10:12:41.503118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0b7e9a42'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'verification_codes',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('is_valid', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_verification_codes_id', 'verification_codes', ['id'])
    op.create_index('ix_verification_codes_user_id', 'verification_codes', ['user_id'])
    op.create_index(
        'uq_verification_codes_valid_user', 'verification_codes', ['user_id'],
        unique=True, postgresql_where=sa.text('is_valid')
    )

    op.create_table(
        'user_contacts',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('username', sa.String(), nullable=True),
        sa.Column('avatar', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_user_contacts_id', 'user_contacts', ['id'])
    op.create_index('ix_user_contacts_user_id', 'user_contacts', ['user_id'], unique=True)

    op.create_table(
        'contacts',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('requester_contact_id', sa.String(), sa.ForeignKey('user_contacts.id'), nullable=False),
        sa.Column('receiver_contact_id', sa.String(), sa.ForeignKey('user_contacts.id'), nullable=False),
        sa.Column('status', sa.Enum('PENDING', 'ACCEPTED', 'REFUSED', name='contactstatus'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('resolved_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_contacts_id', 'contacts', ['id'])
    op.create_index('ix_contacts_requester_contact_id', 'contacts', ['requester_contact_id'])
    op.create_index('ix_contacts_receiver_contact_id', 'contacts', ['receiver_contact_id'])
    op.create_index(
        'uq_contacts_pending_pair', 'contacts', ['requester_contact_id', 'receiver_contact_id'],
        unique=True, postgresql_where=sa.text("status = 'PENDING'")
    )

    op.create_table(
        'categories',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_categories_id', 'categories', ['id'])
    op.create_index('ix_categories_user_id', 'categories', ['user_id'])

    op.create_table(
        'releases',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('value', sa.Numeric(12, 2), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('status', sa.Enum('PENDING', 'PAID', name='releasestatus'), nullable=False),
        sa.Column('type', sa.Enum('INCOME', 'EXPENSE', name='releasetype'), nullable=False),
        sa.Column('release_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('category_id', sa.String(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_releases_id', 'releases', ['id'])
    op.create_index('ix_releases_category_id', 'releases', ['category_id'])
    op.create_index('ix_releases_user_id', 'releases', ['user_id'])


def downgrade() -> None:
    op.drop_table('releases')
    op.drop_table('categories')
    op.drop_table('contacts')
    op.drop_table('user_contacts')
    op.drop_table('verification_codes')
    op.drop_table('users')
    op.execute('DROP TYPE IF EXISTS releasetype')
    op.execute('DROP TYPE IF EXISTS releasestatus')
    op.execute('DROP TYPE IF EXISTS contactstatus')

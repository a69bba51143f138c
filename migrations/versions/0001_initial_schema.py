"""initial schema: users, user_log and reference tables

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email'),
    )
    op.create_table(
        'user_log',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('login_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('logout_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('session_duration', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_user_log_user_id_login_time', 'user_log', ['user_id', 'login_time'])
    op.create_table(
        'disease_solutions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('disease', sa.String(length=255), nullable=False),
        sa.Column('solution', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_disease_solutions_disease', 'disease_solutions', ['disease'])
    op.create_table(
        'disease_products',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('product', sa.String(length=255), nullable=False),
        sa.Column('disease', sa.String(length=255), nullable=False),
        sa.Column('purchase_link', sa.String(length=1024), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_disease_products_disease', 'disease_products', ['disease'])


def downgrade() -> None:
    op.drop_index('ix_disease_products_disease', table_name='disease_products')
    op.drop_table('disease_products')
    op.drop_index('ix_disease_solutions_disease', table_name='disease_solutions')
    op.drop_table('disease_solutions')
    op.drop_index('ix_user_log_user_id_login_time', table_name='user_log')
    op.drop_table('user_log')
    op.drop_table('users')

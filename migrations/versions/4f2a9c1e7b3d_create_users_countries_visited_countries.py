"""Create users, countries and visited_countries tables

Revision ID: 4f2a9c1e7b3d
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '4f2a9c1e7b3d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=15), nullable=False),
        sa.Column('color', sa.String(length=15), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('countries',
        sa.Column('country_code', sa.String(length=2), nullable=False),
        sa.Column('country', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('country_code')
    )
    with op.batch_alter_table('countries', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_countries_country'), ['country'], unique=False)

    op.create_table('visited_countries',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('country_code', sa.String(length=2), nullable=False),
        sa.ForeignKeyConstraint(['country_code'], ['countries.country_code'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('user_id', 'country_code')
    )


def downgrade():
    op.drop_table('visited_countries')
    with op.batch_alter_table('countries', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_countries_country'))

    op.drop_table('countries')
    op.drop_table('users')

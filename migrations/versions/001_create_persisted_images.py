"""create persisted_images table

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'persisted_images',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('bytes', sa.LargeBinary(), nullable=True),
        sa.Column('mime', sa.String(length=255), nullable=False, server_default=''),
    )

def downgrade():
    op.drop_table('persisted_images')

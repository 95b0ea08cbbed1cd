"""create wallet_owners table

Revision ID: 5c2f9e1a7b40
Revises: 
Create Date: 2026-10-17 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c2f9e1a7b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "wallet_owners",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("id_card", sa.Text(), nullable=False),
        sa.Column("wallet_number", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_wallet_owners_id_card", "wallet_owners", ["id_card"], unique=True)
    op.create_index("ix_wallet_owners_wallet_number", "wallet_owners", ["wallet_number"], unique=True)
    op.create_index("ix_wallet_owners_created_at", "wallet_owners", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_wallet_owners_created_at", table_name="wallet_owners")
    op.drop_index("ix_wallet_owners_wallet_number", table_name="wallet_owners")
    op.drop_index("ix_wallet_owners_id_card", table_name="wallet_owners")
    op.drop_table("wallet_owners")

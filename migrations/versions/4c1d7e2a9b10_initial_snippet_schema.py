"""Initial schema - snippets and per-user snippet statuses

Revision ID: 4c1d7e2a9b10
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1d7e2a9b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Snippet metadata; code bodies live in the asset service
    op.create_table(
        "snippets",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("language", sa.String(50), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_snippets_author", "snippets", ["author"])

    # One review status per (snippet, user) sharing relationship
    op.create_table(
        "snippet_statuses",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column(
            "snippet_id",
            sa.BigInteger,
            sa.ForeignKey("snippets.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="PENDING"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("snippet_id", "user_email", name="snippet_status_user_unique"),
    )
    op.create_index("ix_snippet_statuses_snippet_id", "snippet_statuses", ["snippet_id"])
    op.create_index("ix_snippet_statuses_user_email", "snippet_statuses", ["user_email"])


def downgrade() -> None:
    op.drop_index("ix_snippet_statuses_user_email", table_name="snippet_statuses")
    op.drop_index("ix_snippet_statuses_snippet_id", table_name="snippet_statuses")
    op.drop_table("snippet_statuses")
    op.drop_index("ix_snippets_author", table_name="snippets")
    op.drop_table("snippets")

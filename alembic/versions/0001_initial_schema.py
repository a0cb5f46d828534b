"""Initial schema — lifecycle-managed resource tables (brand, example).

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _lifecycle_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer, sa.Identity(), primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("status", sa.SmallInteger, nullable=False),
        sa.Column("detail_info", postgresql.JSONB, nullable=False),
        sa.Column("lock_version", sa.Integer, nullable=False, server_default="1"),
    ]


def upgrade() -> None:
    op.create_table(
        "brand",
        *_lifecycle_columns(),
        sa.Column("sync_mdb", sa.Boolean, nullable=True),
    )
    op.create_index("ix_brand_name", "brand", ["name"])

    op.create_table("example", *_lifecycle_columns())
    op.create_index("ix_example_name", "example", ["name"])


def downgrade() -> None:
    op.drop_index("ix_example_name", table_name="example")
    op.drop_table("example")
    op.drop_index("ix_brand_name", table_name="brand")
    op.drop_table("brand")

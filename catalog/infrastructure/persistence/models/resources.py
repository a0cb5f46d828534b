"""Catalog resource ORM models: brand, example.

Every resource table carries the same lifecycle columns (LifecycleColumns).
Names are indexed but not unique: uniqueness holds among live rows only and
is enforced by the domain validator, so a soft-deleted name can be reused.
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import Boolean, Identity, Integer, SmallInteger, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from catalog.infrastructure.database import Base


class LifecycleColumns:
    """Columns shared by every lifecycle-managed table."""

    id: Mapped[int] = mapped_column(Integer, Identity(), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    status: Mapped[int] = mapped_column(SmallInteger, nullable=False)  # RecordStatus code
    detail_info: Mapped[dict[str, Any]] = mapped_column(
        JSONB, nullable=False, default=dict
    )  # resource map + "change_log" audit trail
    lock_version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1, server_default="1"
    )


class Brand(LifecycleColumns, Base):
    __tablename__ = "brand"

    sync_mdb: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class Example(LifecycleColumns, Base):
    __tablename__ = "example"

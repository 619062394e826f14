"""SQLAlchemy engine factory helpers."""

from __future__ import annotations

import sqlalchemy as sa


def create_db_engine(database_url: str) -> sa.Engine:
    """Create a pooled engine for the provided database URL."""

    return sa.create_engine(database_url, pool_pre_ping=True)

"""SQLAlchemy models for the durable entry store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, Text, func

from .session import Base


class EntryRecord(Base):
    __tablename__ = "entries"
    # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is set
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user = Column(Text, nullable=False, index=True)
    comment = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

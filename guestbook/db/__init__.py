"""SQL backend: declarative model plus per-URL engine/session helpers."""

from .models import EntryRecord
from .session import Base, get_engine, get_session

__all__ = ["Base", "EntryRecord", "get_engine", "get_session"]

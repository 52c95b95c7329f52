"""
Persistence adapters.

Services depend on ``EntryRepository``; which ``EntryStore`` sits behind it
(memory, sql or json) is decided by configuration alone.
"""
from __future__ import annotations

from guestbook.core.config import Settings
from guestbook.domain.entries import StoreUnavailableError

from .base import EntryStore
from .entry_repository import EntryRepository
from .json_storage import JsonEntryStore
from .memory_store import MemoryEntryStore
from .sql_store import SQLEntryStore

__all__ = [
    "EntryRepository",
    "EntryStore",
    "JsonEntryStore",
    "MemoryEntryStore",
    "SQLEntryStore",
    "build_store",
]


def build_store(settings: Settings) -> EntryStore:
    """Instantiate and check the store named by ``settings.storage_backend``."""
    backend = settings.storage_backend
    if backend == "memory":
        store: EntryStore = MemoryEntryStore()
    elif backend == "sql":
        store = SQLEntryStore(settings.database_url)
    elif backend == "json":
        store = JsonEntryStore(settings.json_store_path)
    else:
        raise StoreUnavailableError(f"Unknown STORAGE_BACKEND '{backend}' (use memory, sql or json)")
    store.ensure_ready()
    return store

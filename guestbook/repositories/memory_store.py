"""Ephemeral store: entries live in process memory and vanish on restart."""
from __future__ import annotations

import logging
import threading
from typing import Dict

from guestbook.domain.entries import Entry, EntryNotFoundError, InvalidEntryError, is_storable_id

from .base import EntryStore

logger = logging.getLogger(__name__)


class MemoryEntryStore(EntryStore):
    name = "memory"

    def __init__(self) -> None:
        self._entries: Dict[int, Entry] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, entry: Entry) -> Entry:
        with self._lock:
            stored = entry.with_id(self._next_id)
            self._next_id += 1
            self._entries[stored.id] = stored
        logger.info("Inserted entry %s", stored.id)
        return stored

    def upsert(self, entry: Entry) -> Entry:
        if not is_storable_id(entry.id):
            raise InvalidEntryError(f"id {entry.id} is out of range")
        with self._lock:
            existed = entry.id in self._entries
            # dict assignment keeps the original position for existing keys
            self._entries[entry.id] = entry
            self._next_id = max(self._next_id, entry.id + 1)
        logger.info("%s entry %s", "Updated" if existed else "Inserted", entry.id)
        return entry

    def update(self, entry: Entry) -> Entry:
        with self._lock:
            if entry.id not in self._entries:
                raise EntryNotFoundError(entry.id)
            self._entries[entry.id] = entry
        logger.info("Updated entry %s", entry.id)
        return entry

    def get(self, entry_id: int) -> Entry:
        with self._lock:
            entry = self._entries.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def list(self) -> list[Entry]:
        with self._lock:
            return list(self._entries.values())

    def list_by_user(self, user: str) -> list[Entry]:
        with self._lock:
            return [entry for entry in self._entries.values() if entry.user == user]

    def delete(self, entry_id: int) -> None:
        with self._lock:
            if self._entries.pop(entry_id, None) is None:
                raise EntryNotFoundError(entry_id)
        logger.info("Deleted entry %s", entry_id)

"""Named query intents over an EntryStore."""
from __future__ import annotations

from guestbook.domain.entries import Entry, EntryNotFoundError

from .base import EntryStore


class EntryRepository:
    """Passthrough to the store; keeps services unaware of the storage technology."""

    def __init__(self, store: EntryStore) -> None:
        self.store = store

    def find_all(self) -> list[Entry]:
        return self.store.list()

    def find_by_id(self, entry_id: int) -> Entry:
        return self.store.get(entry_id)

    def find_by_user(self, user: str) -> list[Entry]:
        return self.store.list_by_user(user)

    def exists_by_id(self, entry_id: int) -> bool:
        try:
            self.store.get(entry_id)
        except EntryNotFoundError:
            return False
        return True

    def save(self, entry: Entry) -> Entry:
        if entry.id is None:
            return self.store.insert(entry)
        return self.store.upsert(entry)

    def update(self, entry: Entry) -> Entry:
        return self.store.update(entry)

    def delete_by_id(self, entry_id: int) -> None:
        self.store.delete(entry_id)

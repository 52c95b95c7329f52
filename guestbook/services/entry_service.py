"""Entry use cases: list, lookup, create, update, delete."""

from __future__ import annotations

import logging

from guestbook.domain.entries import Entry, InvalidEntryError, validate_entry
from guestbook.repositories.entry_repository import EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    """Sits between routers and the repository. Errors propagate unchanged.

    With ``strict_updates`` on, ``update`` refuses unknown ids so that
    ``create`` stays the only path that assigns ids. Off, an unknown id is
    inserted as-is (the historical upsert behaviour).
    """

    def __init__(self, repository: EntryRepository, *, strict_updates: bool = True) -> None:
        self.repository = repository
        self.strict_updates = strict_updates

    def list_all(self) -> list[Entry]:
        return self.repository.find_all()

    def get_by_id(self, entry_id: int) -> Entry:
        return self.repository.find_by_id(entry_id)

    def get_by_user(self, user: str) -> list[Entry]:
        return self.repository.find_by_user(user)

    def create(self, entry: Entry) -> Entry:
        # id enviado pelo cliente e ignorado
        return self.repository.save(validate_entry(entry.with_id(None)))

    def update(self, entry: Entry) -> Entry:
        validate_entry(entry)
        if entry.id is None:
            raise InvalidEntryError("id is required to update an entry")
        if self.strict_updates:
            return self.repository.update(entry)
        if not self.repository.exists_by_id(entry.id):
            logger.warning("Update for unknown entry %s inserts a new record", entry.id)
        return self.repository.save(entry)

    def delete_by_id(self, entry_id: int) -> None:
        self.repository.delete_by_id(entry_id)

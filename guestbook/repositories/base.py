"""Record store contract shared by every storage backend."""
from __future__ import annotations

from abc import ABC, abstractmethod

from guestbook.domain.entries import Entry


class EntryStore(ABC):
    """Keyed storage for entries; owns id assignment.

    Implementations raise ``EntryNotFoundError`` from ``get`` and ``delete``
    when the id is unknown, and must serialize id assignment so concurrent
    inserts never collide.
    """

    name = "abstract"

    def ensure_ready(self) -> None:
        """Verify the backing medium is reachable; raise StoreUnavailableError if not."""

    @abstractmethod
    def insert(self, entry: Entry) -> Entry:
        """Persist an entry without id and return it with the assigned id."""

    @abstractmethod
    def upsert(self, entry: Entry) -> Entry:
        """Replace user/comment of ``entry.id``, inserting under that id when missing.

        Ids outside ``1..MAX_ENTRY_ID`` raise ``InvalidEntryError``.
        """

    @abstractmethod
    def update(self, entry: Entry) -> Entry:
        """Replace user/comment of an existing ``entry.id`` in one step; NotFound otherwise."""

    @abstractmethod
    def get(self, entry_id: int) -> Entry:
        ...

    @abstractmethod
    def list(self) -> list[Entry]:
        """All entries in insertion order."""

    @abstractmethod
    def list_by_user(self, user: str) -> list[Entry]:
        """Entries whose user equals ``user`` exactly, in insertion order."""

    @abstractmethod
    def delete(self, entry_id: int) -> None:
        ...

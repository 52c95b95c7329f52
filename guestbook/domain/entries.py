"""Domain model for guestbook entries, plus the error taxonomy shared by all layers."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

# largest id a signed 64-bit integer column can hold
MAX_ENTRY_ID = 2**63 - 1


class EntryError(Exception):
    """Base exception for entry workflows."""


class EntryNotFoundError(EntryError):
    """Raised when no entry has the requested id."""

    def __init__(self, entry_id: int):
        super().__init__(f"No entry with id {entry_id} exists")
        self.entry_id = entry_id


class InvalidEntryError(EntryError):
    """Raised when a required text field is empty."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreUnavailableError(EntryError):
    """Raised when the backing medium cannot be reached at startup."""


@dataclass(frozen=True)
class Entry:
    """A single guestbook record. ``id`` is None until the store assigns one."""

    user: str
    comment: str
    id: Optional[int] = None

    def with_id(self, entry_id: Optional[int]) -> "Entry":
        return replace(self, id=entry_id)

    def to_dict(self) -> dict:
        return {"id": self.id, "user": self.user, "comment": self.comment}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        raw_id = data.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            user=str(data.get("user") or ""),
            comment=str(data.get("comment") or ""),
        )


def is_blank(value: str | None) -> bool:
    return not (value or "").strip()


def validate_entry(entry: Entry) -> Entry:
    """Return the entry unchanged when user and comment are both non-empty."""
    if is_blank(entry.user):
        raise InvalidEntryError("user must not be empty")
    if is_blank(entry.comment):
        raise InvalidEntryError("comment must not be empty")
    return entry


def is_storable_id(entry_id: int) -> bool:
    return 1 <= entry_id <= MAX_ENTRY_ID

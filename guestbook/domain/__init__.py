"""Domain types and rules, free of HTTP and storage concerns."""

from .entries import (
    MAX_ENTRY_ID,
    Entry,
    EntryError,
    EntryNotFoundError,
    InvalidEntryError,
    StoreUnavailableError,
    is_storable_id,
    validate_entry,
)

__all__ = [
    "MAX_ENTRY_ID",
    "Entry",
    "EntryError",
    "EntryNotFoundError",
    "InvalidEntryError",
    "StoreUnavailableError",
    "is_storable_id",
    "validate_entry",
]

"""
Durable store kept in a single JSON file.

Every operation loads the file, applies the change and writes it back while
holding a process-wide lock, so it is only safe with one worker process.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from guestbook.domain.entries import (
    Entry,
    EntryNotFoundError,
    InvalidEntryError,
    StoreUnavailableError,
    is_storable_id,
)

from .base import EntryStore

logger = logging.getLogger(__name__)


def db_defaults(db: dict) -> dict:
    db.setdefault("next_id", 1)
    db.setdefault("entries", [])
    return db


class JsonEntryStore(EntryStore):
    name = "json"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def ensure_ready(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self._lock:
                self._save(self._load())
        except (OSError, ValueError) as exc:
            raise StoreUnavailableError(f"JSON store unusable at {self.path}: {exc}") from exc

    def _load(self) -> dict:
        if self.path.exists():
            with self.path.open("r", encoding="utf-8") as f:
                db = json.load(f)
            if not isinstance(db, dict):
                raise ValueError(f"expected a JSON object, found {type(db).__name__}")
            return db_defaults(db)
        return db_defaults({})

    def _save(self, db: dict) -> None:
        self.path.write_text(json.dumps(db, ensure_ascii=False, indent=2), encoding="utf-8")

    def insert(self, entry: Entry) -> Entry:
        with self._lock:
            db = self._load()
            stored = entry.with_id(int(db["next_id"]))
            db["next_id"] = stored.id + 1
            db["entries"].append(stored.to_dict())
            self._save(db)
        logger.info("Inserted entry %s", stored.id)
        return stored

    def upsert(self, entry: Entry) -> Entry:
        if not is_storable_id(entry.id):
            raise InvalidEntryError(f"id {entry.id} is out of range")
        with self._lock:
            db = self._load()
            for row in db["entries"]:
                if row.get("id") == entry.id:
                    row["user"] = entry.user
                    row["comment"] = entry.comment
                    action = "Updated"
                    break
            else:
                db["entries"].append(entry.to_dict())
                action = "Inserted"
            db["next_id"] = max(int(db["next_id"]), entry.id + 1)
            self._save(db)
        logger.info("%s entry %s", action, entry.id)
        return entry

    def update(self, entry: Entry) -> Entry:
        with self._lock:
            db = self._load()
            row = next((r for r in db["entries"] if r.get("id") == entry.id), None)
            if row is None:
                raise EntryNotFoundError(entry.id)
            row["user"] = entry.user
            row["comment"] = entry.comment
            self._save(db)
        logger.info("Updated entry %s", entry.id)
        return entry

    def get(self, entry_id: int) -> Entry:
        for entry in self.list():
            if entry.id == entry_id:
                return entry
        raise EntryNotFoundError(entry_id)

    def list(self) -> list[Entry]:
        with self._lock:
            rows = self._load()["entries"]
        return [Entry.from_dict(row) for row in rows]

    def list_by_user(self, user: str) -> list[Entry]:
        return [entry for entry in self.list() if entry.user == user]

    def delete(self, entry_id: int) -> None:
        with self._lock:
            db = self._load()
            remaining = [row for row in db["entries"] if row.get("id") != entry_id]
            if len(remaining) == len(db["entries"]):
                raise EntryNotFoundError(entry_id)
            db["entries"] = remaining
            self._save(db)
        logger.info("Deleted entry %s", entry_id)

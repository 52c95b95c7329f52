"""Durable store backed by SQLAlchemy (SQLite, Postgres, ...)."""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, select, text
from sqlalchemy.exc import SQLAlchemyError

from guestbook.core.config import get_settings
from guestbook.db.models import EntryRecord
from guestbook.db.session import Base, get_engine, get_session
from guestbook.domain.entries import (
    Entry,
    EntryNotFoundError,
    InvalidEntryError,
    StoreUnavailableError,
    is_storable_id,
)

from .base import EntryStore

logger = logging.getLogger(__name__)


def _all_query():
    return select(EntryRecord).order_by(EntryRecord.id)


def _by_id_query(entry_id: int):
    return select(EntryRecord).where(EntryRecord.id == entry_id)


def _by_user_query(user: str):
    return select(EntryRecord).where(EntryRecord.user == user).order_by(EntryRecord.id)


def _to_entry(record: EntryRecord) -> Entry:
    return Entry(id=record.id, user=record.user, comment=record.comment)


class SQLEntryStore(EntryStore):
    """CRUD helpers wrapping the SQLAlchemy session, one transaction per operation.

    ``database_url`` defaults to ``DATABASE_URL`` from the settings. Ids the
    integer column cannot hold are treated as unknown instead of reaching the
    driver.
    """

    name = "sql"

    def __init__(self, database_url: str | None = None) -> None:
        self.database_url = (database_url or get_settings().database_url or "").strip()

    def _session(self):
        return get_session(self.database_url)

    def ensure_ready(self) -> None:
        try:
            Base.metadata.create_all(bind=get_engine(self.database_url))
            with self._session() as session:
                session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"SQL store unreachable: {exc}") from exc

    def insert(self, entry: Entry) -> Entry:
        record = EntryRecord(user=entry.user, comment=entry.comment)
        with self._session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            stored = _to_entry(record)
        logger.info("Inserted entry %s", stored.id)
        return stored

    def upsert(self, entry: Entry) -> Entry:
        if not is_storable_id(entry.id):
            raise InvalidEntryError(f"id {entry.id} is out of range")
        with self._session() as session:
            record = session.execute(_by_id_query(entry.id)).scalar_one_or_none()
            if record is None:
                record = EntryRecord(id=entry.id, user=entry.user, comment=entry.comment)
                session.add(record)
                session.flush()
                self._sync_id_sequence(session)
                action = "Inserted"
            else:
                record.user = entry.user
                record.comment = entry.comment
                action = "Updated"
            session.commit()
            session.refresh(record)
            stored = _to_entry(record)
        logger.info("%s entry %s", action, stored.id)
        return stored

    def update(self, entry: Entry) -> Entry:
        if not is_storable_id(entry.id):
            raise EntryNotFoundError(entry.id)
        with self._session() as session:
            record = session.execute(_by_id_query(entry.id).with_for_update()).scalar_one_or_none()
            if record is None:
                raise EntryNotFoundError(entry.id)
            record.user = entry.user
            record.comment = entry.comment
            session.commit()
            session.refresh(record)
            stored = _to_entry(record)
        logger.info("Updated entry %s", stored.id)
        return stored

    @staticmethod
    def _sync_id_sequence(session) -> None:
        # Postgres nao avanca a sequence quando o id vem explicito
        if session.get_bind().dialect.name != "postgresql":
            return
        max_id = session.execute(select(func.max(EntryRecord.id))).scalar_one()
        session.execute(
            text("SELECT setval(pg_get_serial_sequence('entries', 'id'), :value)"),
            {"value": max_id},
        )

    def get(self, entry_id: int) -> Entry:
        if not is_storable_id(entry_id):
            raise EntryNotFoundError(entry_id)
        with self._session() as session:
            record = session.execute(_by_id_query(entry_id)).scalar_one_or_none()
            if record is None:
                raise EntryNotFoundError(entry_id)
            return _to_entry(record)

    def list(self) -> list[Entry]:
        with self._session() as session:
            return [_to_entry(r) for r in session.execute(_all_query()).scalars().all()]

    def list_by_user(self, user: str) -> list[Entry]:
        with self._session() as session:
            return [_to_entry(r) for r in session.execute(_by_user_query(user)).scalars().all()]

    def delete(self, entry_id: int) -> None:
        if not is_storable_id(entry_id):
            raise EntryNotFoundError(entry_id)
        with self._session() as session:
            result = session.execute(delete(EntryRecord).where(EntryRecord.id == entry_id))
            if result.rowcount == 0:
                session.rollback()
                raise EntryNotFoundError(entry_id)
            session.commit()
        logger.info("Deleted entry %s", entry_id)

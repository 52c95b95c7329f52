"""Engine/session helpers for the SQL backend, cached per database URL."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from guestbook.domain.entries import StoreUnavailableError

Base = declarative_base()


def _is_sqlite_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


@lru_cache
def get_engine(url: str):
    url = (url or "").strip()
    if not url:
        raise StoreUnavailableError("DATABASE_URL must be configured to use the SQL backend.")
    if _is_sqlite_memory(url):
        # um unico connection compartilhado, senao cada thread ve um banco vazio
        return create_engine(
            url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, future=True, pool_pre_ping=True)


@lru_cache
def _get_sessionmaker(url: str):
    return sessionmaker(bind=get_engine(url), autoflush=False, autocommit=False, future=True, expire_on_commit=False)


@contextmanager
def get_session(url: str) -> Session:
    session: Session = _get_sessionmaker(url)()
    try:
        yield session
    finally:
        session.close()

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote guestbook e os scripts sejam importáveis durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
for extra in (ROOT, ROOT / "scripts"):
    if str(extra) not in sys.path:
        sys.path.insert(0, str(extra))

import add_entry  # noqa: E402
import migrate_json_to_sql  # noqa: E402
from guestbook.core import config as core_config  # noqa: E402
from guestbook.db import models  # noqa: E402
from guestbook.db import session as db_session  # noqa: E402
from guestbook.domain.entries import Entry  # noqa: E402
from guestbook.repositories import JsonEntryStore, SQLEntryStore  # noqa: E402


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def sql_env(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'test.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    _reset_caches()
    yield monkeypatch
    engine = db_session.get_engine(url)
    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _reset_caches()


def test_add_entry_writes_to_configured_store(sql_env):
    sql_env.setenv("STORAGE_BACKEND", "sql")
    _reset_caches()
    entry = add_entry.main(["--user", "john", "--comment", "Great Comment"])
    assert entry.id == 1
    assert SQLEntryStore().get(1) == Entry(id=1, user="john", comment="Great Comment")


def test_add_entry_rejects_blank_comment(sql_env):
    sql_env.setenv("STORAGE_BACKEND", "sql")
    _reset_caches()
    with pytest.raises(SystemExit):
        add_entry.main(["--user", "john", "--comment", "  "])


def test_migrate_keeps_ids(sql_env, tmp_path):
    source = JsonEntryStore(tmp_path / "entries.json")
    source.ensure_ready()
    source.insert(Entry(user="john", comment="Great Comment"))
    dropped = source.insert(Entry(user="x", comment="gone"))
    source.insert(Entry(user="jane", comment="Me Too!"))
    source.delete(dropped.id)

    assert migrate_json_to_sql.migrate(tmp_path / "entries.json") == 2

    target = SQLEntryStore()
    assert [(e.id, e.user) for e in target.list()] == [(1, "john"), (3, "jane")]
    assert target.insert(Entry(user="new", comment="after")).id == 4


def test_migrate_requires_source_file(sql_env, tmp_path):
    with pytest.raises(SystemExit):
        migrate_json_to_sql.migrate(tmp_path / "missing.json")

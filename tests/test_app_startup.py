"""
Storage selection by configuration and startup failures.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote guestbook seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from guestbook.app import create_app  # noqa: E402
from guestbook.core import config as core_config  # noqa: E402
from guestbook.db import models  # noqa: E402
from guestbook.db import session as db_session  # noqa: E402
from guestbook.domain.entries import Entry, StoreUnavailableError  # noqa: E402
from guestbook.repositories import JsonEntryStore, MemoryEntryStore, SQLEntryStore, build_store  # noqa: E402


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def clean_env(monkeypatch):
    """Limpa variaveis de ambiente e caches antes/depois de cada teste."""
    for name in (
        "APP_ENV",
        "STORAGE_BACKEND",
        "DATABASE_URL",
        "JSON_STORE_PATH",
        "STRICT_UPDATES",
        "LOG_LEVEL",
        "LOG_FILE",
        "HOST",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    _reset_caches()
    yield monkeypatch
    _reset_caches()


def test_settings_defaults(clean_env):
    settings = core_config.get_settings()
    assert settings.app_env == "dev"
    assert settings.storage_backend == "memory"
    assert settings.strict_updates is True
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_settings_read_environment(clean_env):
    clean_env.setenv("STORAGE_BACKEND", " SQL ")
    clean_env.setenv("STRICT_UPDATES", "off")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("PORT", "not-a-port")
    settings = core_config.get_settings()
    assert settings.storage_backend == "sql"
    assert settings.strict_updates is False
    assert settings.log_level == "DEBUG"
    assert settings.port == 8000


@pytest.mark.parametrize(
    "backend,expected",
    [("memory", MemoryEntryStore), ("json", JsonEntryStore)],
)
def test_build_store_selects_backend(clean_env, tmp_path, backend, expected):
    clean_env.setenv("STORAGE_BACKEND", backend)
    clean_env.setenv("JSON_STORE_PATH", str(tmp_path / "data" / "entries.json"))
    store = build_store(core_config.get_settings())
    assert isinstance(store, expected)


def test_unknown_backend_is_fatal(clean_env):
    clean_env.setenv("STORAGE_BACKEND", "redis")
    with pytest.raises(StoreUnavailableError):
        create_app()


def test_unreachable_sql_store_is_fatal(clean_env, tmp_path):
    missing_dir = tmp_path / "does-not-exist"
    clean_env.setenv("STORAGE_BACKEND", "sql")
    clean_env.setenv("DATABASE_URL", f"sqlite:///{missing_dir / 'x.db'}")
    with pytest.raises(StoreUnavailableError):
        create_app()


def test_corrupt_json_store_is_fatal(clean_env, tmp_path):
    path = tmp_path / "entries.json"
    path.write_text("{not json", encoding="utf-8")
    clean_env.setenv("STORAGE_BACKEND", "json")
    clean_env.setenv("JSON_STORE_PATH", str(path))
    with pytest.raises(StoreUnavailableError):
        create_app()


def test_json_store_survives_restart(clean_env, tmp_path):
    clean_env.setenv("STORAGE_BACKEND", "json")
    clean_env.setenv("JSON_STORE_PATH", str(tmp_path / "entries.json"))

    first = TestClient(create_app())
    first.post("/add", json={"user": "john", "comment": "Great Comment"})
    first.post("/add", json={"user": "jane", "comment": "Me Too!"})
    first.delete("/comment/2")

    second = TestClient(create_app())
    assert second.get("/comments").json() == [{"id": 1, "user": "john", "comment": "Great Comment"}]
    second.post("/add", json={"user": "jane", "comment": "again"})
    assert [e["id"] for e in second.get("/comments").json()] == [1, 3]


def test_sql_store_survives_restart(clean_env, tmp_path):
    clean_env.setenv("STORAGE_BACKEND", "sql")
    url = f"sqlite:///{tmp_path / 'test.db'}"
    clean_env.setenv("DATABASE_URL", url)

    first = TestClient(create_app())
    first.post("/add", json={"user": "john", "comment": "Great Comment"})
    assert isinstance(first.app.state.entry_service.repository.store, SQLEntryStore)

    second = TestClient(create_app())
    assert second.get("/user/john").json() == [{"id": 1, "user": "john", "comment": "Great Comment"}]

    engine = db_session.get_engine(url)
    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()


def test_json_store_that_is_not_an_object_is_fatal(clean_env, tmp_path):
    path = tmp_path / "entries.json"
    path.write_text("[]", encoding="utf-8")
    clean_env.setenv("STORAGE_BACKEND", "json")
    clean_env.setenv("JSON_STORE_PATH", str(path))
    with pytest.raises(StoreUnavailableError):
        create_app()


def test_sql_store_uses_database_url_from_given_settings(clean_env, tmp_path):
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    clean_env.chdir(workdir)
    wanted = tmp_path / "wanted.db"
    url = f"sqlite:///{wanted}"
    settings = core_config.Settings(
        app_env="test",
        storage_backend="sql",
        database_url=url,
        json_store_path=str(tmp_path / "unused.json"),
        strict_updates=True,
        log_level="WARNING",
        log_file=None,
    )

    client = TestClient(create_app(settings=settings))
    assert client.post("/add", json={"user": "john", "comment": "hi"}).status_code == 200

    assert wanted.exists()
    assert list(workdir.iterdir()) == []
    assert SQLEntryStore(url).list() == [Entry(id=1, user="john", comment="hi")]

    engine = db_session.get_engine(url)
    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()

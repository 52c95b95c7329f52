"""Application factory: wires store -> repository -> service -> router once at start."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from guestbook.core.config import Settings, get_settings
from guestbook.core.logging_config import setup_logging
from guestbook.repositories import EntryRepository, EntryStore, build_store
from guestbook.routers import comments as comments_router
from guestbook.routers.errors import register_error_handlers
from guestbook.services.entry_service import EntryService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[EntryStore] = None) -> FastAPI:
    """Build the FastAPI app.

    ``store`` overrides the configured backend (tests pass one in). A store
    that cannot be reached raises ``StoreUnavailableError`` here, which stops
    the server before it accepts requests.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = build_store(settings)
    service = EntryService(EntryRepository(store), strict_updates=settings.strict_updates)

    app = FastAPI(title="Guestbook API")
    app.state.settings = settings
    app.state.entry_service = service
    register_error_handlers(app)
    app.include_router(comments_router.router)

    logger.info(
        "Guestbook API ready (env=%s, store=%s, strict_updates=%s)",
        settings.app_env,
        store.name,
        settings.strict_updates,
    )
    return app

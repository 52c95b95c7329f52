"""
FastAPI routers.

Each module exposes an APIRouter included by ``guestbook.app.create_app``.
Routers are the only place where domain errors become HTTP responses.
"""

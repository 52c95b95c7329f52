"""
Core utilities shared across the guestbook API.

Configuration helpers (env vars, storage selection, feature flags) and the
logging setup live here, so routers/services/stores never read os.environ
directly.
"""

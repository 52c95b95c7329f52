"""Guestbook API: entries (author + comment) persisted behind a swappable store."""

"""Pydantic schemas for the HTTP layer."""

from .entry import EntryPayload, EntryRead, ErrorBody

__all__ = ["EntryPayload", "EntryRead", "ErrorBody"]

"""
Pydantic schemas for guestbook entries.

The wire shape is fixed: ``{"id": <int|null>, "user": "...", "comment": "..."}``.
``EntryPayload`` is what clients send to ``/add`` and ``/update``; ``EntryRead``
is what every read endpoint returns.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from guestbook.domain.entries import MAX_ENTRY_ID, Entry, is_blank


class EntryPayload(BaseModel):
    """Schema for creating or updating an entry."""

    id: Optional[int] = Field(None, ge=1, le=MAX_ENTRY_ID, description="Ignored by /add, required by /update")
    user: str = Field(..., description="Author name")
    comment: str = Field(..., description="Comment text")

    @field_validator("user", "comment")
    @classmethod
    def not_blank(cls, v: str, info):
        if is_blank(v):
            raise ValueError(f"{info.field_name} must not be empty")
        return v

    def to_entry(self) -> Entry:
        return Entry(id=self.id, user=self.user, comment=self.comment)


class EntryRead(BaseModel):
    """Schema for reading an entry."""

    id: Optional[int]
    user: str
    comment: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryRead":
        return cls(id=entry.id, user=entry.user, comment=entry.comment)


class ErrorBody(BaseModel):
    """Structured error returned for every failed request."""

    timestamp: str
    status: int
    error: str
    message: str
    path: str

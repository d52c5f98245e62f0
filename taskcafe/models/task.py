from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4
import enum

from pydantic import BaseModel, Field, field_serializer


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3}


class Task(BaseModel):
    """A single to-do item as persisted and served.

    Attributes are snake_case; the JSON file and the HTTP API use the
    camelCase aliases (``createdAt``, ``updatedAt``).
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        # Same shape as JavaScript's Date.toISOString(): 2024-05-01T09:00:00.000Z
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def to_json(self) -> dict:
        """Wire/file representation; ``updatedAt`` is omitted until set."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

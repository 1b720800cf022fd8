"""
Shared base for writable resource schemas.

Every write schema is an explicit allow-list: unknown keys are rejected,
read-only keys are dropped, and blank strings arrive as null.
"""

from typing import Any, ClassVar, FrozenSet
from pydantic import BaseModel, model_validator


class RecordIn(BaseModel):
    """Base for request bodies that become a table row."""

    # Server-managed keys a client may echo back from a previous response
    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"id", "driver_id", "created_at", "updated_at"})

    class Config:
        extra = "forbid"

    @classmethod
    def rename_legacy_fields(cls, data: dict) -> dict:
        return data

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = cls.rename_legacy_fields(dict(data))
        return {
            key: (None if isinstance(value, str) and not value.strip() else value)
            for key, value in data.items()
            if key not in cls.read_only_fields
        }

    def to_record(self) -> dict:
        """Fields the client actually sent, as a column -> value mapping."""
        return self.model_dump(exclude_unset=True)

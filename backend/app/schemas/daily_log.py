"""
Daily Log Pydantic schemas.

Log bodies are upserted by (vehicle, date). Older clients send the date
under the key "data"; it is accepted as an alias.
"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import ClassVar, FrozenSet, Optional
from backend.app.schemas.common import RecordIn


class DailyLogUpsert(RecordIn):
    """Schema for POST /logs/{vehicle_id}; the vehicle comes from the path."""

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"id", "vehicle_id", "created_at", "updated_at"})

    date: date
    distance_km: Optional[float] = Field(None, ge=0)
    trip_count: Optional[int] = Field(None, ge=0)
    uber_earnings: Optional[float] = Field(None, ge=0)
    bolt_earnings: Optional[float] = Field(None, ge=0)
    other_earnings: Optional[float] = Field(None, ge=0)
    extra_expenses: Optional[float] = Field(None, ge=0)

    @classmethod
    def rename_legacy_fields(cls, data: dict) -> dict:
        if "data" in data and "date" not in data:
            data["date"] = data.pop("data")
        return data


class DailyLogCreate(DailyLogUpsert):
    """Schema for POST /logs; the vehicle is named in the body."""

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"id", "created_at", "updated_at"})

    vehicle_id: int = Field(..., gt=0)


class DailyLogResponse(BaseModel):
    """Schema for daily log response."""
    id: int
    vehicle_id: int
    date: date
    distance_km: Optional[float]
    trip_count: Optional[int]
    uber_earnings: Optional[float]
    bolt_earnings: Optional[float]
    other_earnings: Optional[float]
    extra_expenses: Optional[float]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

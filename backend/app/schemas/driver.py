"""
Driver Pydantic schemas.

Defines the verified caller identity and the driver upsert/response models.
"""

from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import ClassVar, FrozenSet, Optional
from backend.app.schemas.common import RecordIn


class DriverIdentity(BaseModel):
    """Identity decoded from a verified bearer token."""
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None


class DriverUpsert(RecordIn):
    """
    Schema for explicit driver registration.

    Used by POST /motoristas. Missing fields fall back to the token's values.
    The id always comes from the token, so sending one is rejected.
    """

    read_only_fields: ClassVar[FrozenSet[str]] = frozenset({"created_at", "updated_at"})

    name: Optional[str] = Field(None, max_length=255, description="Display name")
    email: Optional[EmailStr] = Field(None, description="Contact email")


class DriverResponse(BaseModel):
    """Schema for driver response."""
    id: str
    email: Optional[str]
    name: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

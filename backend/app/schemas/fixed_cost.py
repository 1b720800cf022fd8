"""
Fixed Cost Pydantic schemas.
"""

from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional
from backend.app.schemas.common import RecordIn


class FixedCostCreate(RecordIn):
    """Schema for registering a fixed cost."""
    description: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., ge=0)
    due_date: Optional[date] = None
    cost_type: Optional[str] = Field(None, max_length=50, description="e.g., monthly, annual")


class FixedCostUpdate(RecordIn):
    """Schema for updating a fixed cost (partial)."""
    description: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[float] = Field(None, ge=0)
    due_date: Optional[date] = None
    cost_type: Optional[str] = Field(None, max_length=50)


class FixedCostResponse(BaseModel):
    """Schema for fixed cost response."""
    id: int
    driver_id: str
    description: str
    amount: float
    due_date: Optional[date]
    cost_type: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

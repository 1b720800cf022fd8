"""
Vehicle Pydantic schemas.

Defines request and response models for vehicle management.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from backend.app.schemas.common import RecordIn


class VehicleWrite(RecordIn):
    """Schema for creating or updating a vehicle. Every field is optional."""
    # Identification
    make: Optional[str] = Field(None, max_length=100, description="Manufacturer")
    model: Optional[str] = Field(None, max_length=100)
    plate: Optional[str] = Field(None, max_length=20, description="Registration plate")
    year: Optional[int] = Field(None, ge=1900, le=2100)
    vehicle_type: Optional[str] = Field(None, max_length=50, description="combustion, electric, hybrid...")

    # Monthly costs
    financing: Optional[float] = Field(None, ge=0)
    insurance: Optional[float] = Field(None, ge=0)
    maintenance: Optional[float] = Field(None, ge=0)
    other_fixed_expenses: Optional[float] = Field(None, ge=0)
    personal_expenses: Optional[float] = Field(None, ge=0)
    work_days: Optional[int] = Field(None, ge=0, le=31, description="Working days per month")

    # Consumption
    fuel_price: Optional[float] = Field(None, ge=0, description="Price per litre")
    fuel_efficiency_km_per_l: Optional[float] = Field(None, gt=0)
    electricity_cost_kwh: Optional[float] = Field(None, ge=0)

    daily_profit_target: Optional[float] = Field(None, ge=0)


class VehicleResponse(BaseModel):
    """Schema for vehicle response."""
    id: int
    driver_id: str
    make: Optional[str]
    model: Optional[str]
    plate: Optional[str]
    year: Optional[int]
    vehicle_type: Optional[str]
    financing: Optional[float]
    insurance: Optional[float]
    maintenance: Optional[float]
    other_fixed_expenses: Optional[float]
    personal_expenses: Optional[float]
    work_days: Optional[int]
    fuel_price: Optional[float]
    fuel_efficiency_km_per_l: Optional[float]
    electricity_cost_kwh: Optional[float]
    daily_profit_target: Optional[float]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

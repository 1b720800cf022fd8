"""
Vehicle database model.

A vehicle belongs to exactly one driver and carries the cost and
consumption figures used to work out daily profitability.
"""

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.sql import func
from backend.app.db.session import Base


class Vehicle(Base):
    """
    Vehicle model.

    Mutated and deleted only by its owning driver.
    """
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Ownership - Vehicle belongs to Driver
    driver_id = Column(String(128), ForeignKey("drivers.id", ondelete="CASCADE"), nullable=False, index=True)

    # Identification
    make = Column(String(100), nullable=True)
    model = Column(String(100), nullable=True)
    plate = Column(String(20), nullable=True)
    year = Column(Integer, nullable=True)
    vehicle_type = Column(String(50), nullable=True)  # e.g., "combustion", "electric", "hybrid"

    # Monthly costs
    financing = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    insurance = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    maintenance = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    other_fixed_expenses = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    personal_expenses = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    work_days = Column(Integer, nullable=True)  # working days per month

    # Consumption
    fuel_price = Column(Numeric(10, 3, asdecimal=False), nullable=True)  # per litre
    fuel_efficiency_km_per_l = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    electricity_cost_kwh = Column(Numeric(10, 4, asdecimal=False), nullable=True)

    # Target
    daily_profit_target = Column(Numeric(10, 2, asdecimal=False), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Vehicle(id={self.id}, plate='{self.plate}', driver_id='{self.driver_id}')>"

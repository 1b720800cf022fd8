"""
Daily Log database model.

One row per vehicle per day with mileage, trips and per-platform earnings.
"""

from sqlalchemy import Column, Integer, Numeric, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from backend.app.db.session import Base


class DailyLog(Base):
    """
    Daily Log model.

    (vehicle_id, date) is unique; writes are upserts keyed on it.
    """
    __tablename__ = "daily_logs"
    __table_args__ = (
        UniqueConstraint("vehicle_id", "date", name="uq_daily_logs_vehicle_date"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)

    distance_km = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    trip_count = Column(Integer, nullable=True)

    # Earnings per platform
    uber_earnings = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    bolt_earnings = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    other_earnings = Column(Numeric(10, 2, asdecimal=False), nullable=True)

    extra_expenses = Column(Numeric(10, 2, asdecimal=False), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<DailyLog(id={self.id}, vehicle_id={self.vehicle_id}, date={self.date})>"

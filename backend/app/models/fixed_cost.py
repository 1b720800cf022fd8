"""
Fixed Cost database model.

Recurring expenses (rent, phone plan, licence fees...) owned by a driver.
"""

from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from backend.app.db.session import Base


class FixedCost(Base):
    __tablename__ = "fixed_costs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    driver_id = Column(String(128), ForeignKey("drivers.id", ondelete="CASCADE"), nullable=False, index=True)

    description = Column(String(255), nullable=False)
    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    due_date = Column(Date, nullable=True)
    cost_type = Column(String(50), nullable=True)  # e.g., "monthly", "annual"

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<FixedCost(id={self.id}, description='{self.description}', amount={self.amount})>"

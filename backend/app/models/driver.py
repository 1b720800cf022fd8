"""
Driver database model.

A driver is the authenticated end user. The primary key is the subject id
of the verified identity token, so no local credentials are stored.
"""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from backend.app.db.session import Base


class Driver(Base):
    """
    Driver model.

    Rows are created implicitly on first use (vehicle listing, vehicle or
    cost creation) or explicitly through the driver upsert endpoint.
    """
    __tablename__ = "drivers"

    # Identity provider subject id (uid)
    id = Column(String(128), primary_key=True)
    email = Column(String(255), nullable=True, index=True)
    name = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Driver(id='{self.id}', email='{self.email}')>"

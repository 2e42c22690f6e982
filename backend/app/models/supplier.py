"""
Supplier model for material vendors.
"""

from sqlalchemy import Column, Integer, String, Numeric
from sqlalchemy.orm import relationship

from app.db.base import Base


class Supplier(Base):
    """Supplier model."""

    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True)
    phone = Column(String(100), nullable=False, unique=True)
    rating = Column(Numeric(10, 2), nullable=True)

    # Relationships
    procurements = relationship("ProcurementRecord", back_populates="supplier")

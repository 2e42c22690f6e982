"""
Material model for the procurement catalogue.
"""

from sqlalchemy import Column, Integer, String, Numeric
from sqlalchemy.orm import relationship

from app.db.base import Base


class Material(Base):
    """Material model. Everything except the identifier is optional."""

    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=True, index=True)
    unit_of_measure = Column(String(100), nullable=True)  # e.g. "Ton"
    unit_cost = Column(Numeric(10, 2), nullable=True)
    total_material_cost = Column(Numeric(15, 2), nullable=True)

    # Relationships
    procurements = relationship("ProcurementRecord", back_populates="material")

"""
Procurement record model: one purchase of a material from a supplier for a project.
"""

from sqlalchemy import Column, Integer, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class ProcurementRecord(Base):
    """Procurement transaction model."""

    __tablename__ = "procurement"

    id = Column(Integer, primary_key=True, autoincrement=False)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    material_id = Column(Integer, ForeignKey("materials.id"), nullable=False, index=True)
    quantity_purchased = Column(Numeric(15, 2), nullable=True)
    purchase_cost = Column(Numeric(15, 2), nullable=True)
    purchase_date = Column(Date, nullable=True, index=True)

    # Relationships
    project = relationship("Project", back_populates="procurements")
    supplier = relationship("Supplier", back_populates="procurements")
    material = relationship("Material", back_populates="procurements")

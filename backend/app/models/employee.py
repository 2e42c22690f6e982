"""
Employee model for project staffing.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Employee(Base):
    """Employee model for project staffing."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=False)
    full_name = Column(String(100), nullable=False)
    job_role = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True, index=True)
    status = Column(String(100), nullable=False)  # Free text, e.g. "Active"
    address = Column(String(100), nullable=True)
    phone = Column(String(100), nullable=False, unique=True)

    # Relationships
    assignments = relationship("Assignment", back_populates="employee")

    def __repr__(self):
        return f"<Employee(id={self.id}, email={self.email})>"

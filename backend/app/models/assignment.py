"""
Assignment model linking an employee to a project task.
"""

from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class Assignment(Base):
    """Project assignment model. An employee may hold several rows for the same project."""

    __tablename__ = "project_assignments"

    id = Column(Integer, primary_key=True, autoincrement=False)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    role = Column(String(100), nullable=True)
    task_start_date = Column(Date, nullable=True)
    task_end_date = Column(Date, nullable=True)

    # Relationships
    project = relationship("Project", back_populates="assignments")
    employee = relationship("Employee", back_populates="assignments")

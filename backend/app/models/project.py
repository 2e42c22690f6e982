"""
Project model for delivery tracking.
"""

from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


# Well-known status labels. The column itself is free text and not restricted
# to these values; cost variance matches PROJECT_STATUS_COMPLETED exactly.
PROJECT_STATUS_PLANNED = "Planned"
PROJECT_STATUS_IN_PROGRESS = "In Progress"
PROJECT_STATUS_ON_HOLD = "On Hold"
PROJECT_STATUS_COMPLETED = "Completed"


class Project(Base):
    """Project model.

    ``actual_end_date`` and ``actual_cost`` stay NULL until the project
    reaches a terminal status; NULL means "not yet known", never zero.
    """

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=True, index=True)
    start_date = Column(Date, nullable=True, index=True)
    estimated_end_date = Column(Date, nullable=True)
    actual_end_date = Column(Date, nullable=True, index=True)
    estimated_cost = Column(Numeric(15, 2), nullable=True)
    actual_cost = Column(Numeric(15, 2), nullable=True)
    status = Column(String(100), nullable=True, index=True)

    # Relationships
    client = relationship("Client", back_populates="projects")
    procurements = relationship("ProcurementRecord", back_populates="project")
    assignments = relationship("Assignment", back_populates="project")

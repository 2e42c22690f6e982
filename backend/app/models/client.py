"""
Client model for the firm's customers.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Client(Base):
    """Client model for customer management."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(100), nullable=False, unique=True)
    phone = Column(String(100), nullable=False, unique=True)
    address = Column(String(100), nullable=True)

    # Relationships
    projects = relationship("Project", back_populates="client")

"""
Assignment repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.base_repository import BaseRepository
from app.models.assignment import Assignment


class AssignmentRepository(BaseRepository[Assignment]):
    """Repository for project assignment operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Assignment, session)

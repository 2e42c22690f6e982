"""
Project repository for database operations.
"""

from typing import Optional, List
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import BaseRepository
from app.models.project import Project


class ProjectRepository(BaseRepository[Project]):
    """Repository for project operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Project, session)

    def _base_query(self):
        """Base query with eager loading of client relationship."""
        return (
            select(Project)
            .options(selectinload(Project.client))
            .execution_options(populate_existing=True)
        )

    async def list(
        self,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[Project]:
        """List projects with pagination and filters, eagerly loading client."""
        query = self._base_query()

        # Apply filters
        for key, value in filters.items():
            if hasattr(Project, key):
                query = query.where(getattr(Project, key) == value)

        query = query.order_by(Project.id).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get(self, id: int) -> Optional[Project]:
        """Get project by ID with client relationship loaded."""
        query = self._base_query().where(Project.id == id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_by_client(
        self,
        client_id: int,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Project]:
        """List projects by client."""
        query = self._base_query().where(Project.client_id == client_id)
        query = query.order_by(Project.id).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_status(
        self,
        status: str,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Project]:
        """List projects by exact status label."""
        query = self._base_query().where(Project.status == status)
        query = query.order_by(Project.id).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_by_date_range(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Project]:
        """List projects starting on or after start_date and ending on or before end_date."""
        query = self._base_query()
        if start_date:
            query = query.where(Project.start_date >= start_date)
        if end_date:
            query = query.where(Project.estimated_end_date <= end_date)
        query = query.order_by(Project.id).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

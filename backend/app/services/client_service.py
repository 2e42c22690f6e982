"""
Client service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import EntityService
from app.db.repositories.client_repository import ClientRepository
from app.schemas.client import ClientCreate, ClientUpdate, ClientResponse
from app.models.client import Client


class ClientService(EntityService[Client]):
    """Service for client operations."""

    def __init__(self, session: AsyncSession):
        self.client_repo = ClientRepository(session)
        super().__init__(session, self.client_repo)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        client = await self._create_record(client_data.model_dump(exclude_unset=True))
        return ClientResponse.model_validate(client)

    async def get_client(self, client_id: int) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None
        return ClientResponse.model_validate(client)

    async def list_clients(
        self,
        skip: int = 0,
        limit: int = 100,
        name: Optional[str] = None,
    ) -> tuple[List[ClientResponse], int]:
        """List clients, optionally matching part of the name."""
        if name:
            clients = await self.client_repo.list_by_name(name, skip, limit)
            total = len(clients)
        else:
            clients = await self.client_repo.list(skip=skip, limit=limit)
            total = await self.client_repo.count()
        return [ClientResponse.model_validate(client) for client in clients], total

    async def update_client(
        self,
        client_id: int,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client."""
        updated = await self._update_record(client_id, client_data.model_dump(exclude_unset=True))
        if not updated:
            return None
        return ClientResponse.model_validate(updated)

    async def delete_client(self, client_id: int, cascade: bool = False) -> bool:
        """Delete a client; cascade also removes its projects and their procurement and assignments."""
        return await self._delete_record(client_id, cascade=cascade)

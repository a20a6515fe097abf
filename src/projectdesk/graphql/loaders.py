from uuid import UUID

from sqlalchemy import select
from strawberry.dataloader import DataLoader

from ..database.connection import Database
from ..dbmodels import Clients


class Loaders:
    """Per-request batch loaders; build one instance per GraphQL context."""

    def __init__(self, db: Database):
        self.db = db
        self.client_loader = DataLoader(load_fn=self.load_clients)

    async def load_clients(self, keys: list[UUID]) -> list[Clients | None]:
        """Batch load clients by ID; missing ids map to None."""
        async with self.db.session() as session:
            stmt = select(Clients).where(Clients.id.in_(keys))
            result = await session.execute(stmt)
            clients_map = {client.id: client for client in result.scalars().all()}
            return [clients_map.get(key) for key in keys]

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database import repository
from ...dbmodels import Clients
from ...errors import parse_id
from ...logging import get_logger
from ..context import get_database_from_info, get_loaders_from_info

if TYPE_CHECKING:
    from ..types.client import Client

logger = get_logger(__name__)


# Query resolvers
async def resolve_clients(info: strawberry.Info) -> list[Client]:
    """Resolve every client in storage order."""
    from ..types.client import Client as ClientType

    db = get_database_from_info(info)
    async with db.session() as session:
        clients = await repository.find_all(session, Clients)
        return [ClientType.from_model(client) for client in clients]


async def resolve_client_by_id(info: strawberry.Info, id: strawberry.ID) -> Client | None:
    """Resolve a client by its ID, or None if it does not exist."""
    from ..types.client import Client as ClientType

    client_id = parse_id(id)
    db = get_database_from_info(info)
    async with db.session() as session:
        client = await repository.find_by_id(session, Clients, client_id)
        if client is None:
            logger.info("Client not found", client_id=str(client_id))
            return None
        return ClientType.from_model(client)


# Mutation resolvers
async def add_client(info: strawberry.Info, name: str, email: str, phone: str) -> Client:
    from ..types.client import Client as ClientType

    db = get_database_from_info(info)
    async with db.session() as session:
        client = await repository.create(session, Clients, name=name, email=email, phone=phone)
        logger.info("Client created", client_id=str(client.id))
        return ClientType.from_model(client)


async def delete_client(info: strawberry.Info, id: strawberry.ID) -> Client | None:
    """
    Delete a client and return its last-known state.

    Projects referencing the client are left in place.
    """
    from ..types.client import Client as ClientType

    client_id = parse_id(id)
    db = get_database_from_info(info)
    async with db.session() as session:
        client = await repository.remove_by_id(session, Clients, client_id)
        if client is None:
            logger.info("Client not found for deletion", client_id=str(client_id))
            return None
        removed = ClientType.from_model(client)

    # Later fields in the same document must not see the deleted client
    get_loaders_from_info(info).client_loader.clear(client_id)
    logger.info("Client deleted", client_id=str(client_id))
    return removed

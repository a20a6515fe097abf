"""
Reusable seed data functions for database initialization.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import PROJECT_STATUS_IN_PROGRESS, Clients, Projects
from ..logging import get_logger
from . import repository

logger = get_logger(__name__)

DEMO_CLIENT = {
    "name": "Acme",
    "email": "contact@acme.test",
    "phone": "555-0100",
}

DEMO_PROJECT = {
    "name": "Site Redesign",
    "description": "Refresh the public website and move it to the new CMS.",
    "status": PROJECT_STATUS_IN_PROGRESS,
}


async def ensure_demo_data(db: AsyncSession) -> Clients:
    """
    Ensure the demo client and its project exist.

    Looks the client up by email so repeated runs do not create duplicates.

    Returns:
        The demo client (existing or newly created)
    """
    stmt = select(Clients).where(Clients.email == DEMO_CLIENT["email"])
    result = await db.execute(stmt)
    existing = result.scalars().first()

    if existing:
        logger.debug("Demo client already exists", client_id=str(existing.id))
        return existing

    client = await repository.create(db, Clients, **DEMO_CLIENT)
    project = await repository.create(db, Projects, client_id=client.id, **DEMO_PROJECT)

    logger.info(
        "Seeded demo data",
        client_id=str(client.id),
        project_id=str(project.id),
    )
    return client

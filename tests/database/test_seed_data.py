"""
Tests for demo seed data
"""

import pytest

from projectdesk.database import repository
from projectdesk.database.seed_data import ensure_demo_data
from projectdesk.dbmodels import Clients, Projects


@pytest.mark.asyncio
async def test_ensure_demo_data_is_idempotent(database):
    async with database.session() as session:
        first = await ensure_demo_data(session)

    async with database.session() as session:
        second = await ensure_demo_data(session)

    assert first.id == second.id

    async with database.session() as session:
        assert len(await repository.find_all(session, Clients)) == 1
        projects = await repository.find_all(session, Projects)
        assert len(projects) == 1
        assert projects[0].client_id == first.id
        assert projects[0].status == "In Progress"

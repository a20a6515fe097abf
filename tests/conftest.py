"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import Any

import pytest
import pytest_asyncio
from strawberry.types import ExecutionResult

from projectdesk.database import Database
from projectdesk.graphql.context import build_context
from projectdesk.graphql.schema import schema

ExecuteFn = Callable[..., Awaitable[ExecutionResult]]


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Provide a fresh in-memory SQLite database with all tables created."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.dispose()


@pytest.fixture
def execute(database: Database) -> ExecuteFn:
    """Execute a GraphQL document against the schema with a fresh context."""

    async def _execute(query: str, **variables: Any) -> ExecutionResult:
        return await schema.execute(
            query,
            variable_values=variables or None,
            context_value=build_context(database),
        )

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")

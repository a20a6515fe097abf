"""
Root GraphQL query definitions
"""

import strawberry

from ..types.client import Client
from ..types.project import Project


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def projects(self, info: strawberry.Info) -> list[Project]:
        """Get all projects."""
        from ..resolvers.project import resolve_projects

        return await resolve_projects(info)

    @strawberry.field
    async def project(self, info: strawberry.Info, id: strawberry.ID) -> Project | None:
        """Get a project by ID."""
        from ..resolvers.project import resolve_project_by_id

        return await resolve_project_by_id(info, id)

    @strawberry.field
    async def clients(self, info: strawberry.Info) -> list[Client]:
        """Get all clients."""
        from ..resolvers.client import resolve_clients

        return await resolve_clients(info)

    @strawberry.field
    async def client(self, info: strawberry.Info, id: strawberry.ID) -> Client | None:
        """Get a client by ID."""
        from ..resolvers.client import resolve_client_by_id

        return await resolve_client_by_id(info, id)

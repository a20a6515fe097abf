"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.client import Client
from ..types.project import Project, ProjectStatus


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Client mutations
    @strawberry.mutation(name="addClient")
    async def add_client(
        self, info: strawberry.Info, name: str, email: str, phone: str
    ) -> Client:
        """Create a new client."""
        from ..resolvers.client import add_client

        return await add_client(info, name, email, phone)

    @strawberry.mutation(name="deleteClient")
    async def delete_client(self, info: strawberry.Info, id: strawberry.ID) -> Client | None:
        """Delete a client. Projects referencing it are not removed."""
        from ..resolvers.client import delete_client

        return await delete_client(info, id)

    # Project mutations
    @strawberry.mutation(name="addProject")
    async def add_project(
        self,
        info: strawberry.Info,
        name: str,
        description: str,
        client_id: strawberry.ID,
        status: ProjectStatus = ProjectStatus.new,
    ) -> Project:
        """Create a new project for a client."""
        from ..resolvers.project import add_project

        return await add_project(info, name, description, status, client_id)

    @strawberry.mutation(name="deleteProject")
    async def delete_project(self, info: strawberry.Info, id: strawberry.ID) -> Project | None:
        """Delete a project."""
        from ..resolvers.project import delete_project

        return await delete_project(info, id)

    @strawberry.mutation(name="updateProject")
    async def update_project(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        description: str | None = None,
        status: ProjectStatus | None = None,
    ) -> Project | None:
        """Update the supplied fields of a project."""
        from ..resolvers.project import update_project

        return await update_project(info, id, name, description, status)

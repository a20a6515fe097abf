"""
Project GraphQL type definitions
"""

from enum import Enum
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...dbmodels import (
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    PROJECT_STATUS_NOT_STARTED,
)

if TYPE_CHECKING:
    from ...dbmodels import Projects
    from .client import Client


@strawberry.enum(name="ProjectStatus")
class ProjectStatus(Enum):
    """Project status; member names are the wire codes, values the stored labels."""

    new = PROJECT_STATUS_NOT_STARTED
    process = PROJECT_STATUS_IN_PROGRESS
    completed = PROJECT_STATUS_COMPLETED


@strawberry.type
class Project:
    """Project type for GraphQL API."""

    id: strawberry.ID
    name: str
    description: str
    status: str
    client_id: strawberry.ID

    @strawberry.field
    async def client(
        self, info: strawberry.Info
    ) -> Annotated["Client", strawberry.lazy(".client")] | None:
        """Get the client this project belongs to, or null if it no longer exists."""
        from ..resolvers.project import resolve_project_client

        return await resolve_project_client(self, info)

    @classmethod
    def from_model(cls, project: "Projects") -> "Project":
        return cls(
            id=strawberry.ID(str(project.id)),
            name=project.name,
            description=project.description,
            status=project.status,
            client_id=strawberry.ID(str(project.client_id)),
        )

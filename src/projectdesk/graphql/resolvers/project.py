from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...database import repository
from ...dbmodels import Projects
from ...errors import parse_id
from ...logging import get_logger
from ..context import get_database_from_info, get_loaders_from_info

if TYPE_CHECKING:
    from ..types.client import Client
    from ..types.project import Project, ProjectStatus

logger = get_logger(__name__)


# Query resolvers
async def resolve_projects(info: strawberry.Info) -> list[Project]:
    """Resolve every project in storage order."""
    from ..types.project import Project as ProjectType

    db = get_database_from_info(info)
    async with db.session() as session:
        projects = await repository.find_all(session, Projects)
        return [ProjectType.from_model(project) for project in projects]


async def resolve_project_by_id(info: strawberry.Info, id: strawberry.ID) -> Project | None:
    """Resolve a project by its ID, or None if it does not exist."""
    from ..types.project import Project as ProjectType

    project_id = parse_id(id)
    db = get_database_from_info(info)
    async with db.session() as session:
        project = await repository.find_by_id(session, Projects, project_id)
        if project is None:
            logger.info("Project not found", project_id=str(project_id))
            return None
        return ProjectType.from_model(project)


# Field resolvers
async def resolve_project_client(project: Project, info: strawberry.Info) -> Client | None:
    """
    Resolve the client a project references.

    The reference is not enforced by storage, so a deleted or unknown client
    resolves to None rather than an error.
    """
    from ..types.client import Client as ClientType

    client = await get_loaders_from_info(info).client_loader.load(parse_id(project.client_id))
    if client is None:
        logger.info(
            "Project references a missing client",
            project_id=str(project.id),
            client_id=str(project.client_id),
        )
        return None
    return ClientType.from_model(client)


# Mutation resolvers
async def add_project(
    info: strawberry.Info,
    name: str,
    description: str,
    status: ProjectStatus,
    client_id: strawberry.ID,
) -> Project:
    """Create a project. The referenced client is not required to exist."""
    from ..types.project import Project as ProjectType

    owner_id = parse_id(client_id)
    db = get_database_from_info(info)
    async with db.session() as session:
        project = await repository.create(
            session,
            Projects,
            name=name,
            description=description,
            status=status.value,
            client_id=owner_id,
        )
        logger.info("Project created", project_id=str(project.id), client_id=str(owner_id))
        return ProjectType.from_model(project)


async def delete_project(info: strawberry.Info, id: strawberry.ID) -> Project | None:
    from ..types.project import Project as ProjectType

    project_id = parse_id(id)
    db = get_database_from_info(info)
    async with db.session() as session:
        project = await repository.remove_by_id(session, Projects, project_id)
        if project is None:
            logger.info("Project not found for deletion", project_id=str(project_id))
            return None
        logger.info("Project deleted", project_id=str(project_id))
        return ProjectType.from_model(project)


async def update_project(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str | None = None,
    description: str | None = None,
    status: ProjectStatus | None = None,
) -> Project | None:
    """
    Apply a partial update to a project.

    Only arguments that were supplied with a value are written; omitted
    (or null) arguments leave the stored field unchanged. Returns None when
    no project has the given ID.
    """
    from ..types.project import Project as ProjectType

    project_id = parse_id(id)

    values: dict[str, Any] = {}
    if name is not None:
        values["name"] = name
    if description is not None:
        values["description"] = description
    if status is not None:
        values["status"] = status.value

    db = get_database_from_info(info)
    async with db.session() as session:
        project = await repository.update_by_id(session, Projects, project_id, values)
        if project is None:
            logger.info("Project not found for update", project_id=str(project_id))
            return None
        logger.info("Project updated", project_id=str(project_id), fields=sorted(values))
        return ProjectType.from_model(project)

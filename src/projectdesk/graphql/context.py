"""
GraphQL execution context
"""

from typing import Any

import strawberry

from ..database.connection import Database
from .loaders import Loaders


def build_context(db: Database, request: Any = None) -> dict[str, Any]:
    """Build the per-request context handed to every resolver."""
    return {
        "request": request,
        "db": db,
        "loaders": Loaders(db),
    }


def get_database_from_info(info: strawberry.Info) -> Database:
    return info.context["db"]


def get_loaders_from_info(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]

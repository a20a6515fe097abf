"""
Client GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Clients


@strawberry.type
class Client:
    """Client type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    phone: str

    @classmethod
    def from_model(cls, client: "Clients") -> "Client":
        return cls(
            id=strawberry.ID(str(client.id)),
            name=client.name,
            email=client.email,
            phone=client.phone,
        )

"""
Exceptions surfaced through the GraphQL layer
"""

from uuid import UUID


class StorageError(Exception):
    """Raised when the storage layer cannot complete an operation."""

    pass


class InvalidIdError(StorageError):
    """Raised when a record identifier is not a well-formed UUID."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid id: {value!r}")


def parse_id(value: str | UUID) -> UUID:
    """Convert an external identifier into a UUID, raising InvalidIdError if malformed."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError) as e:
        raise InvalidIdError(value) from e

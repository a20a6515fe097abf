"""Storage operations shared by the client and project resolvers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Base
from ..errors import StorageError

ModelT = TypeVar("ModelT", bound=Base)


async def find_all(session: AsyncSession, model: type[ModelT]) -> Sequence[ModelT]:
    try:
        result = await session.execute(select(model))
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to list {model.__tablename__}: {e}") from e
    return result.scalars().all()


async def find_by_id(session: AsyncSession, model: type[ModelT], record_id: UUID) -> ModelT | None:
    try:
        return await session.get(model, record_id)
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to load {model.__tablename__} {record_id}: {e}") from e


async def create(session: AsyncSession, model: type[ModelT], **values: Any) -> ModelT:
    """Insert a new record and return it with its assigned id."""
    record = model(**values)
    session.add(record)
    try:
        await session.flush()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to create {model.__tablename__}: {e}") from e
    return record


async def remove_by_id(
    session: AsyncSession, model: type[ModelT], record_id: UUID
) -> ModelT | None:
    """Delete a record, returning its last-known state or None if it did not exist."""
    record = await find_by_id(session, model, record_id)
    if record is None:
        return None
    try:
        await session.delete(record)
        await session.flush()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to delete {model.__tablename__} {record_id}: {e}") from e
    return record


async def update_by_id(
    session: AsyncSession, model: type[ModelT], record_id: UUID, values: dict[str, Any]
) -> ModelT | None:
    """Apply a partial update; keys absent from ``values`` are left untouched."""
    record = await find_by_id(session, model, record_id)
    if record is None:
        return None
    for key, value in values.items():
        setattr(record, key, value)
    try:
        await session.flush()
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to update {model.__tablename__} {record_id}: {e}") from e
    return record

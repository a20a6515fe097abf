"""
Database models for projectdesk (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

import uuid
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Index, MetaData, String, Text, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

PROJECT_STATUS_NOT_STARTED = "Not Started"
PROJECT_STATUS_IN_PROGRESS = "In Progress"
PROJECT_STATUS_COMPLETED = "Completed"


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Clients(Base):
    __tablename__ = "clients"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.current_timestamp()
    )


class Projects(Base):
    __tablename__ = "projects"
    __table_args__ = (Index("idx_projects_client", "client_id"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=PROJECT_STATUS_NOT_STARTED
    )
    # No foreign key: projects may outlive the client they reference
    client_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=func.current_timestamp()
    )


target_metadata = Base.metadata

__all__ = [
    "Base",
    "Clients",
    "Projects",
    "PROJECT_STATUS_NOT_STARTED",
    "PROJECT_STATUS_IN_PROGRESS",
    "PROJECT_STATUS_COMPLETED",
    "target_metadata",
]

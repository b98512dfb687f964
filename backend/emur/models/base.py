"""
Base Model Classes
Provides common fields and functionality for all database models.

Every persisted entity has:
- an internal integer primary key (database-local, never used as identity
  outside the service)
- a creation timestamp

Entities addressed by clients additionally carry a public UUID column,
generated by a column default, which is the only identifier exposed over HTTP.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Uuid, func

from emur.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """
    Abstract base model with common fields for all tables.

    Provides:
    - Integer primary key (auto-increment)
    - created_at timestamp (automatically set on insert)

    Example:
        class Media(BaseModel):
            __tablename__ = "media"
            media_url = Column(String)
            # id, created_at are inherited automatically
    """

    # Make this an abstract base class (no table created for BaseModel itself)
    __abstract__ = True

    # Primary Key: internal numeric identifier
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Timestamp: Record Creation
    # Set by Python on insert; server_default covers rows inserted by SQL
    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self):
        """
        String representation of model instance.
        Useful for debugging and logging.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"


class PublicModel(BaseModel):
    """
    Abstract base for entities exposed to clients.

    Adds the public UUID. Services never persist a client-supplied value in
    this column: inserts go through Repository.create_with_omit("uuid") so
    the default generates it.
    """

    __abstract__ = True

    uuid = Column(
        Uuid(as_uuid=True),
        unique=True,
        index=True,
        default=uuid.uuid4,
        nullable=False,
    )

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id}, uuid={self.uuid})>"


class UpdatedAtMixin:
    """Adds an updated_at column refreshed on every UPDATE."""

    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
    )

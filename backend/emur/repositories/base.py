"""
Generic Repository
CRUD access to one SQLAlchemy model over a request-scoped session.

Repositories flush but never commit: services own the transaction and call
commit() once per use case, so multi-row operations stay atomic.
"""

import logging
import uuid as uuid_lib
from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from emur.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


# ============================================================================
# Errors
# ============================================================================

class RepositoryError(Exception):
    """Base class for persistence-layer errors."""


class InvalidInputError(RepositoryError):
    def __init__(self, message: str = "input value cannot be nil"):
        super().__init__(message)


class RecordNotFoundError(RepositoryError):
    def __init__(self, message: str = "record not found"):
        super().__init__(message)


class PersistenceError(RepositoryError):
    """Driver failure while writing; the message carries the operation prefix."""


class DuplicateRecordError(PersistenceError):
    """A unique constraint rejected the write."""


# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """
    True when the IntegrityError comes from a unique constraint.

    Foreign key, NOT NULL and check violations are also IntegrityErrors but
    are not duplicates.
    """
    if getattr(error.orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    # SQLite carries no SQLSTATE, only the message
    return "UNIQUE constraint failed" in str(error.orig)


# ============================================================================
# Repository
# ============================================================================

class Repository(Generic[ModelT]):
    """
    Typed CRUD operations for a single model.

    Example:
        repo = Repository(db, Symptom)
        symptom = repo.find_by_uuid(symptom_uuid)  # -> Symptom
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    # ------------------------------------------------------------------ writes

    def create(self, value: Optional[ModelT]) -> ModelT:
        if value is None:
            raise InvalidInputError()
        self.db.add(value)
        self._flush("failed to create record: ")
        return value

    def create_with_omit(self, value: Optional[ModelT], *omit: str) -> ModelT:
        """
        Insert leaving the named columns to their defaults.

        Any value already assigned to an omitted attribute is discarded, so
        client supplied identifiers never reach the database.
        """
        if value is None:
            raise InvalidInputError()
        state = inspect(value)
        for name in omit:
            if name in state.dict:
                delattr(value, name)
        self.db.add(value)
        self._flush("failed to create record with omitted columns: ")
        return value

    def update(self, value: Optional[ModelT]) -> ModelT:
        if value is None:
            raise InvalidInputError()
        self.db.add(value)
        self._flush("failed to update record: ")
        return value

    def delete(self, value: Optional[ModelT]) -> None:
        if value is None:
            raise InvalidInputError()
        self.db.delete(value)
        self._flush("failed to delete record: ")

    # ------------------------------------------------------------------- reads

    def find_by_uuid(self, value: Union[str, uuid_lib.UUID]) -> ModelT:
        """
        Load an entity by its public UUID.

        Raises:
            RecordNotFoundError: unknown or malformed UUID
        """
        if not isinstance(value, uuid_lib.UUID):
            try:
                value = uuid_lib.UUID(str(value))
            except ValueError:
                raise RecordNotFoundError()
        entity = self.db.query(self.model).filter(self.model.uuid == value).first()
        if entity is None:
            raise RecordNotFoundError()
        return entity

    def find_by_id(self, value: int) -> ModelT:
        entity = self.db.get(self.model, value)
        if entity is None:
            raise RecordNotFoundError()
        return entity

    def first(self, *criteria: Any) -> ModelT:
        entity = self.db.query(self.model).filter(*criteria).first()
        if entity is None:
            raise RecordNotFoundError()
        return entity

    def find(self, *criteria: Any, order_by: Any = None, limit: Optional[int] = None,
             offset: Optional[int] = None) -> List[ModelT]:
        query = self.db.query(self.model).filter(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def find_item_by_ids(self, first_id: int, second_id: int, first_column: str,
                         second_column: str) -> Optional[ModelT]:
        """
        Lookup on a join table by its two foreign keys.

        Example:
            repo.find_item_by_ids(user.id, symptom.id, "user_id", "symptom_id")
        """
        return (
            self.db.query(self.model)
            .filter(
                getattr(self.model, first_column) == first_id,
                getattr(self.model, second_column) == second_id,
            )
            .first()
        )

    # ---------------------------------------------------------------- internal

    def _flush(self, prefix: str) -> None:
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                logger.info(f"[Repository] {self.model.__name__}: unique constraint rejected write")
                raise DuplicateRecordError(f"{prefix}{e.orig}") from e
            logger.error(f"[Repository] {self.model.__name__}: {prefix}{e.orig}")
            raise PersistenceError(f"{prefix}{e.orig}") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[Repository] {self.model.__name__}: {prefix}{e}")
            raise PersistenceError(f"{prefix}{e}") from e

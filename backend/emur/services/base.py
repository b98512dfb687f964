"""
Service Base
Shared plumbing for domain services: requester resolution, UUID lookups
and translation of repository errors into HTTP-mapped domain errors.
"""

import logging
from typing import TypeVar
from uuid import UUID

from sqlalchemy.orm import Session

from emur.core.exceptions import BadRequestError, InternalError, NotFoundError
from emur.models.user import User
from emur.repositories.base import DuplicateRecordError, PersistenceError, RecordNotFoundError, Repository
from emur.repositories.user import UserRepository

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class BaseService:
    """
    Base class for services bound to a request-scoped session.

    Subclasses create their repositories in __init__ and commit once per
    public method.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def requester(self, claims) -> User:
        """User behind the token claims (request.state.user)."""
        try:
            return self.users.find_by_uuid(claims.user_uuid)
        except RecordNotFoundError:
            raise NotFoundError("user not found")

    @staticmethod
    def get_or_404(repo: Repository[EntityT], uuid: UUID, label: str) -> EntityT:
        try:
            return repo.find_by_uuid(uuid)
        except RecordNotFoundError:
            raise NotFoundError(f"{label} not found")

    @staticmethod
    def get_by_id_or_404(repo: Repository[EntityT], entity_id: int, label: str) -> EntityT:
        """Lookup by internal id, for the few payloads that carry one (ratings)."""
        try:
            return repo.find_by_id(entity_id)
        except RecordNotFoundError:
            raise NotFoundError(f"{label} not found")

    def commit(self) -> None:
        self.db.commit()

    @staticmethod
    def persistence_failure(action: str, error: PersistenceError) -> InternalError:
        """
        Map a write failure to a domain error.

        Duplicates surface as 400 unless the caller handled them first.
        """
        if isinstance(error, DuplicateRecordError):
            return BadRequestError(f"{action}: record already exists")
        logger.error(f"[{action}] {error}")
        return InternalError(f"error {action}")

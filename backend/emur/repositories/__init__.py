"""
Repositories
Typed data access for every entity, built on the generic Repository.
"""

from emur.repositories.base import (
    DuplicateRecordError,
    InvalidInputError,
    PersistenceError,
    RecordNotFoundError,
    Repository,
    RepositoryError,
)

__all__ = [
    "Repository",
    "RepositoryError",
    "InvalidInputError",
    "RecordNotFoundError",
    "PersistenceError",
    "DuplicateRecordError",
]

"""
User Service
Profile reads/updates and the administrator status toggles.
"""

import logging
from uuid import UUID

from emur.models.user import User
from emur.repositories.base import PersistenceError
from emur.schemas.user import UserUpdate
from emur.services.base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    def get_profile(self, claims) -> User:
        return self.requester(claims)

    def update_profile(self, claims, data: UserUpdate) -> User:
        """
        Update the caller's profile with the fields present in the request.

        city and country are always present (required by UserUpdate).
        """
        user = self.requester(claims)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        try:
            self.users.update(user)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating user", e)
        logger.info(f"[User] Profile {user.uuid} updated")
        return user

    def set_active(self, user_uuid: UUID, status: bool) -> User:
        return self._set_flag(user_uuid, "is_active", status)

    def set_banned(self, user_uuid: UUID, status: bool) -> User:
        return self._set_flag(user_uuid, "is_banned", status)

    def _set_flag(self, user_uuid: UUID, field: str, status: bool) -> User:
        user = self.get_or_404(self.users, user_uuid, "user")
        setattr(user, field, status)
        try:
            self.users.update(user)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure(f"updating user {field}", e)
        logger.info(f"[User] {user.uuid} {field}={status}")
        return user

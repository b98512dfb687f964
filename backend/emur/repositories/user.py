"""User, role and role-link repositories."""

from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from emur.models.user import Role, User, UserRole
from emur.repositories.base import Repository


class UserRepository(Repository[User]):
    def __init__(self, db: Session):
        super().__init__(db, User)

    def find_by_email(self, email: str) -> User:
        """Case-insensitive lookup; raises RecordNotFoundError."""
        return self.first(func.lower(User.email) == email.strip().lower())

    def distinct_locations(self) -> List[Tuple[str, str]]:
        """
        Distinct (country, city) pairs of users that filled both fields.

        Used by the forecast worker to decide which locations to poll.
        """
        rows = (
            self.db.query(User.country, User.city)
            .filter(
                User.country.isnot(None), User.country != "",
                User.city.isnot(None), User.city != "",
            )
            .distinct()
            .order_by(User.country, User.city)
            .all()
        )
        return [(country, city) for country, city in rows]


class RoleRepository(Repository[Role]):
    def __init__(self, db: Session):
        super().__init__(db, Role)

    def find_by_name(self, name: str) -> Optional[Role]:
        return self.db.query(Role).filter(Role.role == name).first()


class UserRoleRepository(Repository[UserRole]):
    def __init__(self, db: Session):
        super().__init__(db, UserRole)

"""
User Model
Represents community members and administrators.

Personal fields (first name, last name, profile image) are encrypted at rest
through the EncryptedText column type; email stays in clear text because it
is the login key and carries a unique constraint.

Roles are stored in a separate roles table and linked through role_user,
one row per (user, role).
"""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from emur.core.security import EncryptedText
from emur.db.base import Base
from emur.models.base import BaseModel, PublicModel, UpdatedAtMixin


class User(UpdatedAtMixin, PublicModel):
    """
    User model for authentication and profile management.

    Fields:
        id (int): Internal primary key
        uuid (UUID): Public identifier (JWT "user_uuid" claim)
        first_name, last_name (str): Encrypted at rest
        profile_image (str): Encrypted URL of the profile picture
        date_of_birth (date): Parsed from DD-MM-YYYY on profile update
        sex (str): Free text as entered by the user
        email (str): Unique login email
        password (str): bcrypt hash, never plain text
        user_type (str): Patient, caregiver... (free text)
        is_active (bool): Forced to True at signup
        is_banned (bool): Set by administrators
        city, country (str): Location used by the forecast worker
        deleted_at (datetime): Soft delete marker

    Relationships:
        roles: Many-to-many with Role through role_user
    """
    __tablename__ = "users"

    first_name = Column(EncryptedText, nullable=True)
    last_name = Column(EncryptedText, nullable=True)
    profile_image = Column(EncryptedText, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    sex = Column(String(50), nullable=True)

    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False, comment="bcrypt hash")
    user_type = Column(String(100), nullable=True)

    is_active = Column(Boolean, default=False, nullable=False)
    is_banned = Column(Boolean, default=False, nullable=False)

    city = Column(String(255), nullable=True)
    country = Column(String(255), nullable=True)

    deleted_at = Column(DateTime(timezone=True), nullable=True)

    roles = relationship("Role", secondary="role_user", lazy="selectin", viewonly=True)

    @property
    def role(self):
        """Name of the first role linked to the user, or None."""
        return self.roles[0].role if self.roles else None

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"


class Role(Base):
    """Role catalog: 'user' and 'admin'."""
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    role = Column(String(50), unique=True, nullable=False)

    def __repr__(self):
        return f"<Role(id={self.id}, role={self.role})>"


class UserRole(BaseModel):
    """Join row linking a user to a role."""
    __tablename__ = "role_user"
    __table_args__ = (
        UniqueConstraint("user_id", "role_id", name="uq_role_user_user_role"),
    )

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role_id = Column(Integer, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)

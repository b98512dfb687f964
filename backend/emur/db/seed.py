"""
Database Seeding Script
Creates the tables, the role catalog and optionally the first administrator.

This script:
    1. Creates all tables that do not exist yet
    2. Inserts the "user" and "admin" roles (skipped when present)
    3. Creates the admin from ADMIN_EMAIL / ADMIN_PASSWORD when both are set

Usage:
    # From backend directory
    python -m emur.db.seed

    # Or from Docker container
    docker-compose exec backend python -m emur.db.seed
"""

import logging
import sys
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from emur.core.config import Settings, get_settings
from emur.core.constants import ROLE_ADMIN, VALID_ROLES
from emur.core.security import configure_field_encryption, hash_password
from emur.db.base import Base
from emur.db.session import SessionLocal, engine
from emur.models.user import Role, User, UserRole
from emur.services.error_logging import configure_logging

logger = logging.getLogger(__name__)


def seed_roles(db: Session) -> List[str]:
    """
    Insert the missing roles.

    Returns:
        Names of the roles inserted by this call
    """
    existing = {role.role for role in db.query(Role).all()}
    inserted = [name for name in VALID_ROLES if name not in existing]
    for name in inserted:
        db.add(Role(role=name))
    db.commit()
    return inserted


def create_admin(db: Session, email: str, password: str) -> Optional[User]:
    """
    Create an administrator account if the email is not registered yet.

    Returns:
        The new user, or None when the email already exists
    """
    email = email.strip().lower()
    if db.query(User).filter(User.email == email).first():
        logger.info(f"[Seed] Admin {email} already exists, skipping")
        return None

    role = db.query(Role).filter(Role.role == ROLE_ADMIN).first()
    if role is None:
        raise RuntimeError("roles must be seeded before creating the admin")

    admin = User(email=email, password=hash_password(password), is_active=True, is_banned=False)
    try:
        db.add(admin)
        db.flush()
        db.add(UserRole(user_id=admin.id, role_id=role.id))
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    logger.info(f"[Seed] Admin {email} created")
    return admin


def run(settings: Settings) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("[Seed] Tables created/verified")

    db = SessionLocal()
    try:
        inserted = seed_roles(db)
        logger.info(f"[Seed] Roles inserted: {inserted or 'none'}")

        if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
            create_admin(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    finally:
        db.close()


def main():
    """
    Main function to run seeding script.

    Usage:
        python -m emur.db.seed
    """
    settings = get_settings()
    configure_logging(settings)
    configure_field_encryption(settings.encryption_secret)

    try:
        run(settings)
    except Exception:
        logger.exception("[Seed] Seeding failed")
        sys.exit(1)

    logger.info("[Seed] Done")


if __name__ == "__main__":
    main()

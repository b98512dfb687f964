"""
Authentication Service
Handles JWT token creation and verification, login and signup.

Tokens are HS256 JWTs signed with JWT_TOKEN_KEY carrying the claims:

    {"email": "...", "user_uuid": "...", "role": "user", "exp": 1700000000}

Login returns them with the "Bearer " prefix already applied.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from emur.core.config import Settings
from emur.core.constants import ROLE_USER
from emur.core.exceptions import BadRequestError, ConflictError, ForbiddenError, InternalError
from emur.core.security import hash_password, verify_password
from emur.models.user import User, UserRole
from emur.repositories.base import DuplicateRecordError, PersistenceError, RecordNotFoundError
from emur.repositories.user import RoleRepository, UserRepository, UserRoleRepository
from emur.schemas.user import LoginRequest, SignUpRequest

logger = logging.getLogger(__name__)

# Algorithm used for signing tokens (HS256 = HMAC with SHA-256)
ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "


class TokenClaims(BaseModel):
    """Claims carried by access tokens, placed on request.state.user."""
    email: str
    user_uuid: UUID
    role: Optional[str] = None


# ============================================================================
# JWT Token Functions
# ============================================================================

def create_access_token(settings: Settings, email: str, user_uuid: UUID, role: Optional[str]) -> str:
    """
    Create a signed JWT for a user.

    Example:
        token = create_access_token(settings, user.email, user.uuid, "user")
        # Use in header: Authorization: Bearer {token}
    """
    expire = datetime.now(timezone.utc) + timedelta(hours=settings.JWT_TOKEN_EXPIRED)
    payload = {
        "email": email,
        "user_uuid": str(user_uuid),
        "role": role,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_signing_key, algorithm=ALGORITHM)


def verify_token(settings: Settings, token: str) -> Optional[TokenClaims]:
    """
    Verify signature and expiry and extract the claims.

    Accepts the token with or without the "Bearer " prefix.

    Returns:
        TokenClaims if the token is valid, None otherwise
    """
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    try:
        payload = jwt.decode(token, settings.jwt_signing_key, algorithms=[ALGORITHM])
        return TokenClaims(**payload)
    except (JWTError, ValidationError, TypeError):
        return None


# ============================================================================
# Login / Signup
# ============================================================================

class AuthService:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.users = UserRepository(db)
        self.roles = RoleRepository(db)
        self.user_roles = UserRoleRepository(db)

    def login(self, credentials: LoginRequest) -> str:
        """
        Check the credentials and issue a token.

        Returns:
            "Bearer <jwt>"

        Raises:
            BadRequestError: unknown email or wrong password
            ForbiddenError: banned user
        """
        try:
            user = self.users.find_by_email(credentials.email)
        except RecordNotFoundError:
            logger.info(f"[Login] Unknown email {credentials.email}")
            raise BadRequestError("user not found")

        if not verify_password(credentials.password, user.password):
            logger.info(f"[Login] Password mismatch for {user.uuid}")
            raise BadRequestError("incorrect/mismatch password")

        if user.is_banned:
            raise ForbiddenError("user is banned")

        token = create_access_token(self.settings, user.email, user.uuid, user.role)
        return BEARER_PREFIX + token

    def signup(self, request: SignUpRequest) -> User:
        """
        Register a user and link it to the "user" role in one transaction.

        Raises:
            ConflictError: email already registered
        """
        role = self.roles.find_by_name(ROLE_USER)
        if role is None:
            logger.error("[SignUp] Role 'user' is not seeded")
            raise InternalError("default role is missing")

        user = User(
            email=request.email.lower(),
            password=hash_password(request.password),
            is_active=True,
            is_banned=False,
        )
        try:
            self.users.create_with_omit(user, "uuid")
            self.user_roles.create(UserRole(user_id=user.id, role_id=role.id))
            self.db.commit()
        except DuplicateRecordError:
            logger.info(f"[SignUp] Duplicate email {request.email}")
            raise ConflictError("User already exists")
        except PersistenceError as e:
            logger.error(f"[SignUp] {e}")
            raise InternalError("failed to create user")

        self.db.refresh(user)
        logger.info(f"[SignUp] User {user.uuid} registered")
        return user

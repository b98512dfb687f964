"""
API Dependencies
Common dependencies used across API endpoints.

This module provides:
- authenticate: bearer JWT -> TokenClaims on request.state.user
- authorize(*roles): role check on top of authenticate
- Object storage and media service providers
- Conversion of uploaded files for the media service

Dependencies are injected into FastAPI endpoints using Depends().
"""

import logging
from typing import List, Optional

from fastapi import Depends, Request, UploadFile
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from emur.core.config import Settings, get_settings
from emur.core.constants import ROLE_ADMIN, ROLE_USER
from emur.core.exceptions import AuthenticationError, ForbiddenError
from emur.db.session import get_db
from emur.integrations.storage import ObjectStorage, SpacesStorage
from emur.services.auth_service import TokenClaims, verify_token
from emur.services.media_service import MediaService, UploadedFile

logger = logging.getLogger(__name__)


# Raw Authorization header: "Bearer <jwt>" or the bare token.
# Missing headers fall through to authenticate().
security = APIKeyHeader(name="Authorization", auto_error=False)


def authenticate(
    request: Request,
    authorization: Optional[str] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    """
    Validate the bearer token and expose its claims.

    Raises:
        AuthenticationError: missing, malformed, badly signed or expired token
            (rendered as a 401 with an empty body)

    Usage in endpoint:
        @router.get("/profile")
        def get_profile(claims: TokenClaims = Depends(authenticate)):
            return claims.email
    """
    if not authorization:
        raise AuthenticationError("missing token")

    claims = verify_token(settings, authorization.strip())
    if claims is None:
        raise AuthenticationError("invalid token")

    request.state.user = claims
    return claims


def authorize(*roles: str):
    """
    Build a dependency that requires one of the given roles.

    Usage:
        @router.post("", dependencies=[Depends(authorize(ROLE_ADMIN))])
    """
    allowed = set(roles)

    def dependency(claims: TokenClaims = Depends(authenticate)) -> TokenClaims:
        if not claims.role or claims.role not in allowed:
            logger.info(f"[Authorize] {claims.user_uuid} with role {claims.role!r} denied (needs {sorted(allowed)})")
            raise ForbiddenError("user is not authorized to access this resource")
        return claims

    return dependency


require_admin = authorize(ROLE_ADMIN)
require_user = authorize(ROLE_USER)
require_member = authorize(ROLE_ADMIN, ROLE_USER)


# ============================================================================
# Storage and media
# ============================================================================

_storage: Optional[ObjectStorage] = None


def get_storage() -> ObjectStorage:
    """Process-wide object storage client (overridden in tests)."""
    global _storage
    if _storage is None:
        _storage = SpacesStorage(get_settings())
    return _storage


def get_media_service(
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> MediaService:
    return MediaService(db, storage, settings)


def to_uploaded_file(file: UploadFile) -> UploadedFile:
    """Read an UploadFile into memory (sync endpoints)."""
    return UploadedFile(
        filename=file.filename or "",
        content_type=file.content_type or "",
        data=file.file.read(),
    )


def to_uploaded_files(files: Optional[List[UploadFile]]) -> List[UploadedFile]:
    return [to_uploaded_file(f) for f in files or [] if f.filename]

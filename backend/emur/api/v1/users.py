"""
User API Endpoints
Login, signup, profile and administrator status toggles.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import authenticate, require_admin
from emur.core.config import Settings, get_settings
from emur.db.session import get_db
from emur.schemas.common import APIResponse, StatusRequest, envelope
from emur.schemas.user import LoginRequest, SignUpRequest, TokenData, UserResponse, UserUpdate
from emur.services.auth_service import AuthService, TokenClaims
from emur.services.user_service import UserService


router = APIRouter(prefix="/users")


@router.post("/login", response_model=APIResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Authenticate and issue a JWT.

    Returns data {"token": "Bearer <jwt>"}.
    """
    token = AuthService(db, settings).login(credentials)
    return envelope(status.HTTP_200_OK, "Token generated successfully", TokenData(token=token))


@router.post("/signup", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def signup(
    request: SignUpRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a user with the "user" role. Duplicate email -> 409."""
    user = AuthService(db, settings).signup(request)
    return envelope(status.HTTP_201_CREATED, "User registered successfully", {"uuid": user.uuid})


@router.get("", response_model=APIResponse)
def get_profile(claims: TokenClaims = Depends(authenticate), db: Session = Depends(get_db)):
    user = UserService(db).get_profile(claims)
    return envelope(status.HTTP_200_OK, "User information retrieved successfully", UserResponse.model_validate(user))


@router.put("", response_model=APIResponse)
def update_profile(
    data: UserUpdate,
    claims: TokenClaims = Depends(authenticate),
    db: Session = Depends(get_db),
):
    user = UserService(db).update_profile(claims, data)
    return envelope(status.HTTP_200_OK, "User updated successfully", UserResponse.model_validate(user))


@router.put("/active/{user_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def set_active(user_uuid: UUID, body: StatusRequest, db: Session = Depends(get_db)):
    user = UserService(db).set_active(user_uuid, body.status)
    return envelope(status.HTTP_200_OK, "User active status updated successfully", UserResponse.model_validate(user))


@router.put("/banned/{user_uuid}", response_model=APIResponse, dependencies=[Depends(require_admin)])
def set_banned(user_uuid: UUID, body: StatusRequest, db: Session = Depends(get_db)):
    user = UserService(db).set_banned(user_uuid, body.status)
    return envelope(status.HTTP_200_OK, "User banned status updated successfully", UserResponse.model_validate(user))

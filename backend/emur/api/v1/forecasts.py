"""
Forecasts API Endpoints
Weather rows stored by the forecast worker for the caller's location.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_member
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.forecast import ForecastResponse
from emur.services.auth_service import TokenClaims
from emur.services.forecast_service import ForecastService
from emur.services.user_service import UserService


router = APIRouter(prefix="/forecasts")


@router.get("", response_model=APIResponse)
def list_forecasts(claims: TokenClaims = Depends(require_member), db: Session = Depends(get_db)):
    """Empty list when the caller has no country/city on the profile."""
    user = UserService(db).get_profile(claims)
    forecasts = ForecastService(db).list_for_user(user)
    return envelope(status.HTTP_200_OK, "Forecasts retrieved successfully",
                    [ForecastResponse.model_validate(f) for f in forecasts])

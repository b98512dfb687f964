"""
Monitoring API Endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_user
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.symptom import MonitoringCreate, MonitoringResponse
from emur.services.auth_service import TokenClaims
from emur.services.monitoring_service import MonitoringService


router = APIRouter(prefix="/monitorings")


@router.get("", response_model=APIResponse)
def list_monitorings(claims: TokenClaims = Depends(require_user), db: Session = Depends(get_db)):
    monitorings = MonitoringService(db).list_for_user(claims)
    return envelope(status.HTTP_200_OK, "Monitorings retrieved successfully",
                    [MonitoringResponse.model_validate(m) for m in monitorings])


@router.post("", response_model=APIResponse)
def create_monitoring(
    data: MonitoringCreate,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Report a severity for a symptom.

    400 when the symptom is unknown, the scale exceeds the symptom maximum
    or the caller already reported this symptom.
    """
    monitoring = MonitoringService(db).create(claims, data)
    return envelope(status.HTTP_200_OK, "Monitoring created successfully", MonitoringResponse.model_validate(monitoring))

"""
Health Services API Endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_member
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.health_service import HealthServiceCreate, HealthServiceRatingCreate, HealthServiceResponse, RatingResponse
from emur.services.health_service import HealthServiceService


router = APIRouter(prefix="/healthservices", dependencies=[Depends(require_member)])


@router.get("", response_model=APIResponse)
def list_health_services(db: Session = Depends(get_db)):
    services = HealthServiceService(db).list_services()
    return envelope(status.HTTP_200_OK, "Health services retrieved successfully",
                    [HealthServiceResponse.model_validate(s) for s in services])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_health_service(data: HealthServiceCreate, db: Session = Depends(get_db)):
    service = HealthServiceService(db).create(data)
    return envelope(status.HTTP_201_CREATED, "Health service created successfully",
                    HealthServiceResponse.model_validate(service))


@router.post("/rating", response_model=APIResponse)
def rate_health_service(data: HealthServiceRatingCreate, db: Session = Depends(get_db)):
    """Rate a health service for a reminder. Zero ids -> 400."""
    rating = HealthServiceService(db).rate(data)
    return envelope(status.HTTP_200_OK, "Health service rated successfully", RatingResponse.model_validate(rating))

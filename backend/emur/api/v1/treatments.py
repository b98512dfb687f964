"""
Treatment API Endpoints
All routes are scoped to the caller's own treatments.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_user
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.treatment import TreatmentCreate, TreatmentResponse, TreatmentUpdate
from emur.services.auth_service import TokenClaims
from emur.services.treatment_service import TreatmentService


router = APIRouter(prefix="/treatments")


@router.get("", response_model=APIResponse)
def list_treatments(claims: TokenClaims = Depends(require_user), db: Session = Depends(get_db)):
    treatments = TreatmentService(db).list_for_user(claims)
    return envelope(status.HTTP_200_OK, "Treatments retrieved successfully",
                    [TreatmentResponse.model_validate(t) for t in treatments])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_treatment(
    data: TreatmentCreate,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    treatment = TreatmentService(db).create(claims, data)
    return envelope(status.HTTP_201_CREATED, "Treatment created successfully", TreatmentResponse.model_validate(treatment))


@router.put("/{treatment_uuid}", response_model=APIResponse)
def update_treatment(
    treatment_uuid: UUID,
    data: TreatmentUpdate,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    treatment = TreatmentService(db).update(claims, treatment_uuid, data)
    return envelope(status.HTTP_200_OK, "Treatment updated successfully", TreatmentResponse.model_validate(treatment))


@router.delete("/{treatment_uuid}", response_model=APIResponse)
def delete_treatment(
    treatment_uuid: UUID,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    TreatmentService(db).delete(claims, treatment_uuid)
    return envelope(status.HTTP_200_OK, "Treatment deleted successfully")

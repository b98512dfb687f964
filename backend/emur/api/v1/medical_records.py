"""
Medical Record API Endpoints
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_user
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.medical_record import MedicalRecordCreate, MedicalRecordResponse, MedicalRecordUpdate
from emur.services.auth_service import TokenClaims
from emur.services.medical_record_service import MedicalRecordService


router = APIRouter(prefix="/medicalrecords")


@router.get("", response_model=APIResponse)
def get_medical_record(claims: TokenClaims = Depends(require_user), db: Session = Depends(get_db)):
    record = MedicalRecordService(db).get_for_user(claims)
    return envelope(status.HTTP_200_OK, "Medical record retrieved successfully", MedicalRecordResponse.model_validate(record))


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_medical_record(
    data: MedicalRecordCreate,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    record = MedicalRecordService(db).create(claims, data)
    return envelope(status.HTTP_201_CREATED, "Medical record created successfully", MedicalRecordResponse.model_validate(record))


@router.put("/{record_uuid}", response_model=APIResponse)
def update_medical_record(
    record_uuid: UUID,
    data: MedicalRecordUpdate,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    """Only the owner of the record may update it (403 otherwise)."""
    record = MedicalRecordService(db).update(claims, record_uuid, data)
    return envelope(status.HTTP_200_OK, "Medical record updated successfully", MedicalRecordResponse.model_validate(record))

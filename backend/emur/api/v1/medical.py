"""
Medical Registry API Endpoints
Practitioner list, CSV bulk import and ratings.
"""

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_member
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.health_service import MedicalRatingCreate, MedicalResponse, RatingResponse
from emur.services.medical_service import MedicalService


router = APIRouter(prefix="/medical", dependencies=[Depends(require_member)])


@router.get("", response_model=APIResponse)
def list_medicals(db: Session = Depends(get_db)):
    medicals = MedicalService(db).list_medicals()
    return envelope(status.HTTP_200_OK, "Medicals retrieved successfully",
                    [MedicalResponse.model_validate(m) for m in medicals])


@router.post("", response_model=APIResponse)
def import_medicals(file: UploadFile = File(...), db: Session = Depends(get_db)):
    """
    Bulk import from a Latin-1, ";"-delimited CSV.

    Columns: FirstName;_;LastName;_;CjppuNumber;ProfessionNumber (header skipped).
    The import is all-or-nothing.
    """
    count = MedicalService(db).import_csv(file.file.read())
    return envelope(status.HTTP_200_OK, "Medicals imported successfully", {"imported": count})


@router.post("/rating", response_model=APIResponse)
def rate_medical(data: MedicalRatingCreate, db: Session = Depends(get_db)):
    rating = MedicalService(db).rate(data)
    return envelope(status.HTTP_200_OK, "Medical rated successfully", RatingResponse.model_validate(rating))

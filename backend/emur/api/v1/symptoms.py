"""
Symptom API Endpoints
Catalog (admin writes) and the caller's tracking list.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_admin, require_member, require_user
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.symptom import SymptomCreate, SymptomResponse, SymptomUserRequest
from emur.services.auth_service import TokenClaims
from emur.services.symptom_service import SymptomService


router = APIRouter(prefix="/symptoms")


@router.get("", response_model=APIResponse, dependencies=[Depends(require_member)])
def list_symptoms(db: Session = Depends(get_db)):
    symptoms = SymptomService(db).list_symptoms()
    return envelope(status.HTTP_200_OK, "Symptoms retrieved successfully",
                    [SymptomResponse.model_validate(s) for s in symptoms])


@router.post("", response_model=APIResponse, dependencies=[Depends(require_admin)])
def create_symptom(data: SymptomCreate, db: Session = Depends(get_db)):
    """
    Example:
        {"name": "Fatigue", "is_active": true, "scale": 3}
    """
    symptom = SymptomService(db).create(data)
    return envelope(status.HTTP_200_OK, "Symptom created successfully", SymptomResponse.model_validate(symptom))


@router.post("/add-user", response_model=APIResponse)
def add_user_to_symptom(
    body: SymptomUserRequest,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    symptom = SymptomService(db).add_user(claims, body.symptom)
    return envelope(status.HTTP_200_OK, "Symptom added to user", SymptomResponse.model_validate(symptom))


@router.post("/remove-user", response_model=APIResponse)
def remove_user_from_symptom(
    body: SymptomUserRequest,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    SymptomService(db).remove_user(claims, body.symptom)
    return envelope(status.HTTP_200_OK, "Symptom removed from user")


@router.get("/user", response_model=APIResponse)
def list_user_symptoms(claims: TokenClaims = Depends(require_user), db: Session = Depends(get_db)):
    symptoms = SymptomService(db).list_for_user(claims)
    return envelope(status.HTTP_200_OK, "User symptoms retrieved successfully",
                    [SymptomResponse.model_validate(s) for s in symptoms])

"""
Answers API Endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import authenticate
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.question import AnswerCreate, AnswerResponse
from emur.services.auth_service import TokenClaims
from emur.services.question_service import QuestionService


router = APIRouter(prefix="/answers")


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_answer(
    data: AnswerCreate,
    claims: TokenClaims = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """Answer a question. Unknown question_uuid -> 404."""
    answer = QuestionService(db).create_answer(claims, data)
    return envelope(status.HTTP_201_CREATED, "Answer created successfully", AnswerResponse.model_validate(answer))

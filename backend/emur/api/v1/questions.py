"""
Questions API Endpoints
Community questions and their answers.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emur.api.v1.deps import require_member
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.question import AnswerResponse, QuestionCreate, QuestionDetail, QuestionResponse
from emur.services.auth_service import TokenClaims
from emur.services.question_service import QuestionService


router = APIRouter(prefix="/questions")


@router.get("", response_model=APIResponse, dependencies=[Depends(require_member)])
def list_questions(db: Session = Depends(get_db)):
    questions = QuestionService(db).list_questions()
    return envelope(status.HTTP_200_OK, "Questions retrieved successfully",
                    [QuestionResponse.model_validate(q) for q in questions])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_question(
    data: QuestionCreate,
    claims: TokenClaims = Depends(require_member),
    db: Session = Depends(get_db),
):
    question = QuestionService(db).create_question(claims, data)
    return envelope(status.HTTP_201_CREATED, "Question created successfully", QuestionResponse.model_validate(question))


@router.get("/{question_uuid}", response_model=APIResponse, dependencies=[Depends(require_member)])
def get_question(question_uuid: UUID, db: Session = Depends(get_db)):
    question, answers = QuestionService(db).get_with_answers(question_uuid)
    detail = QuestionDetail(
        question=QuestionResponse.model_validate(question),
        answers=[AnswerResponse.model_validate(a) for a in answers],
    )
    return envelope(status.HTTP_200_OK, "Question retrieved successfully", detail)

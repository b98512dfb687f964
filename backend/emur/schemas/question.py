"""
Question and Answer Schemas
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class QuestionCreate(BaseModel):
    text: str = Field(..., min_length=1)


class QuestionResponse(BaseModel):
    uuid: UUID
    text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AnswerCreate(BaseModel):
    """
    Example:
        {"question_uuid": "0b6f...", "text": "Try resting after lunch"}
    """
    question_uuid: UUID
    text: str = Field(..., min_length=1)


class AnswerResponse(BaseModel):
    uuid: UUID
    text: str
    is_public: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuestionDetail(BaseModel):
    question: QuestionResponse
    answers: List[AnswerResponse] = Field(default_factory=list)

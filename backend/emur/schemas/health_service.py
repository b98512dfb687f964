"""
Health Service and Medical Schemas
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class HealthServiceCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class HealthServiceResponse(BaseModel):
    uuid: UUID
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HealthServiceRatingCreate(BaseModel):
    """IDs are validated non-zero by the service."""
    health_service_id: int
    reminder_id: int
    rating: int


class MedicalResponse(BaseModel):
    uuid: UUID
    first_name: str
    last_name: str
    cjppu_number: Optional[str] = None
    profession_number: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MedicalRatingCreate(BaseModel):
    medical_id: int
    reminder_id: int
    rating: int


class RatingResponse(BaseModel):
    id: int
    reminder_id: int
    rating: int

    model_config = ConfigDict(from_attributes=True)

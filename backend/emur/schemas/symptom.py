"""
Symptom and Monitoring Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SymptomCreate(BaseModel):
    """
    Example:
        {"name": "Fatigue", "is_active": true, "scale": 3}
    """
    name: str = Field(..., min_length=1, max_length=255)
    is_active: bool = False
    scale: int = Field(0, ge=0, description="Maximum severity users may report")


class SymptomResponse(BaseModel):
    uuid: UUID
    name: str
    is_active: bool
    scale: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SymptomUserRequest(BaseModel):
    """Add/remove a symptom from the caller's tracking list."""
    symptom: UUID


class MonitoringCreate(BaseModel):
    """
    Example:
        {"symptom": "8f5c...", "scale": 2}
    """
    symptom: UUID
    scale: int = Field(..., ge=0)


class MonitoringResponse(BaseModel):
    symptom: SymptomResponse
    scale: int
    date: datetime

    model_config = ConfigDict(from_attributes=True)

"""
Treatment Schemas
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Frequency(BaseModel):
    """{"day": "monday", "time": ["08:00", "20:00"]}"""
    day: str
    time: List[str] = Field(default_factory=list)


class Shot(BaseModel):
    """{"name": "Interferon", "dose": 30}"""
    name: str
    dose: int


class TreatmentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    frequency: List[Frequency] = Field(default_factory=list)
    shots: List[Shot] = Field(default_factory=list)
    date_start: Optional[datetime] = None
    notes: Optional[str] = None


class TreatmentCreate(TreatmentBase):
    pass


class TreatmentUpdate(TreatmentBase):
    """Full replacement of the treatment fields."""
    pass


class TreatmentResponse(TreatmentBase):
    uuid: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

"""
Map Schemas
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class HoursAvailability(BaseModel):
    day: str
    open_time: str
    close_time: str


class Phone(BaseModel):
    number: str


class MapBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    latitude: str = Field(..., min_length=1)
    longitude: str = Field(..., min_length=1)
    type: Optional[int] = None
    hours_availability: List[HoursAvailability] = Field(default_factory=list)
    phone: List[Phone] = Field(default_factory=list)
    is_published: bool = False


class MapCreate(MapBase):
    pass


class MapUpdate(MapBase):
    pass


class MapResponse(MapBase):
    uuid: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

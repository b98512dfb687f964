"""
Forecast Schemas
Provider payload models (weatherapi.com forecast.json) and the API response.

Only the fields the worker reads are declared; anything else in the
provider payload is ignored.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Provider payload
# ============================================================================

class Condition(BaseModel):
    """
    Example:
        {"text": "Lluvia moderada", "icon": "//cdn.weatherapi.com/weather/64x64/day/302.png", "code": 1189}
    """
    text: str = ""
    icon: str = ""
    code: int = 0


class Day(BaseModel):
    maxtemp_c: float = 0.0
    mintemp_c: float = 0.0
    avgtemp_c: float = 0.0
    maxwind_kph: float = 0.0
    avghumidity: float = 0.0
    uv: float = 0.0
    condition: Condition = Field(default_factory=Condition)


class ForecastDay(BaseModel):
    date: str
    day: Day


class ForecastInfo(BaseModel):
    forecastday: List[ForecastDay] = Field(default_factory=list)


class ForecastPayload(BaseModel):
    """Top-level forecast.json document."""
    forecast: ForecastInfo = Field(default_factory=ForecastInfo)

    model_config = ConfigDict(extra="ignore")


# ============================================================================
# API
# ============================================================================

class ForecastResponse(BaseModel):
    uuid: UUID
    country: str
    state: str
    avg_temperature: Optional[int] = None
    max_temperature: Optional[int] = None
    min_temperature: Optional[int] = None
    description: Optional[str] = None
    humidity: Optional[float] = None
    code: Optional[int] = None
    wind: Optional[float] = None
    uv: Optional[int] = None
    date: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

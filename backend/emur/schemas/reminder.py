"""
Reminder Schemas

Reminders arrive as multipart forms: notification and task are JSON
strings inside the form and date uses DD/MM/YYYY. ReminderForm parses them
into typed values.
"""

import json
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from emur.core.constants import REMINDER_DATE_FORMAT


class Notification(BaseModel):
    """{"days_or_hours": "days", "hours_before": 24}"""
    days_or_hours: str
    hours_before: int


class Task(BaseModel):
    """{"name": "Bring blood tests", "checked": false}"""
    name: str
    checked: bool = False


class ReminderForm(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    date: datetime
    notification: List[Notification] = Field(default_factory=list)
    task: List[Task] = Field(default_factory=list)
    note: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        if isinstance(v, datetime):
            return v
        try:
            return datetime.strptime(str(v), REMINDER_DATE_FORMAT).replace(tzinfo=timezone.utc)
        except ValueError:
            raise ValueError("date must use the DD/MM/YYYY format")

    @field_validator("notification", "task", mode="before")
    @classmethod
    def parse_json_list(cls, v):
        if v is None or v == "":
            return []
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                raise ValueError("must be a JSON list")
        return v


class ReminderResponse(BaseModel):
    uuid: UUID
    name: str
    type: str
    date: datetime
    notification: List[Notification] = Field(default_factory=list)
    task: List[Task] = Field(default_factory=list)
    note: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReminderWithMedia(BaseModel):
    reminder: ReminderResponse
    media: List[str] = Field(default_factory=list)

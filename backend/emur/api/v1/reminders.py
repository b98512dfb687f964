"""
Reminders API Endpoints
Owner-scoped appointments and tasks with image attachments.

Reminders are sent as multipart forms: notification and task are JSON
strings, date is DD/MM/YYYY and "file" may be repeated.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from emur.api.v1.deps import get_media_service, require_user, to_uploaded_files
from emur.db.session import get_db
from emur.schemas.common import APIResponse, envelope
from emur.schemas.reminder import ReminderForm, ReminderResponse, ReminderWithMedia
from emur.services.auth_service import TokenClaims
from emur.services.media_service import MediaService
from emur.services.reminder_service import ReminderService


router = APIRouter(prefix="/reminders")


def _with_media(reminder) -> ReminderWithMedia:
    return ReminderWithMedia(
        reminder=ReminderResponse.model_validate(reminder),
        media=ReminderService.media_urls(reminder),
    )


def reminder_form(
    name: str = Form(...),
    type: str = Form(...),
    date: str = Form(..., description="DD/MM/YYYY"),
    notification: Optional[str] = Form(None, description='JSON list, e.g. [{"days_or_hours": "days", "hours_before": 24}]'),
    task: Optional[str] = Form(None, description='JSON list, e.g. [{"name": "Fasting", "checked": false}]'),
    note: Optional[str] = Form(None),
) -> ReminderForm:
    try:
        return ReminderForm(name=name, type=type, date=date, notification=notification, task=task, note=note)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


@router.get("", response_model=APIResponse)
def list_reminders(
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    reminders = ReminderService(db, media).list_for_user(claims)
    return envelope(status.HTTP_200_OK, "Reminders retrieved successfully", [_with_media(r) for r in reminders])


@router.post("", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
def create_reminder(
    claims: TokenClaims = Depends(require_user),
    form: ReminderForm = Depends(reminder_form),
    file: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    reminder = ReminderService(db, media).create(claims, form, to_uploaded_files(file))
    return envelope(status.HTTP_201_CREATED, "Reminder created successfully", _with_media(reminder))


@router.put("", response_model=APIResponse)
def update_reminder(
    uuid: UUID = Query(..., description="Reminder UUID"),
    claims: TokenClaims = Depends(require_user),
    form: ReminderForm = Depends(reminder_form),
    file: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    """
    Replace the reminder fields. New files replace all attachments; without
    files the current attachments are kept. Non-owner -> 403.
    """
    reminder = ReminderService(db, media).update(claims, uuid, form, to_uploaded_files(file))
    return envelope(status.HTTP_200_OK, "Reminder updated successfully", _with_media(reminder))


@router.delete("", response_model=APIResponse)
def delete_reminder(
    uuid: UUID = Query(..., description="Reminder UUID"),
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
    media: MediaService = Depends(get_media_service),
):
    ReminderService(db, media).delete(claims, uuid)
    return envelope(status.HTTP_200_OK, "Reminder deleted successfully")

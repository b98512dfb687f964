"""
Reminder Service
Owner-scoped reminders with optional image attachments.

Updating a reminder with new files replaces all of its attachments; without
files the attachments are kept. Deleting a reminder removes its stored
objects, join rows and media rows.
"""

import logging
from typing import List
from uuid import UUID

from emur.core.exceptions import ForbiddenError
from emur.models.media import Media, ReminderMedia
from emur.models.reminder import Reminder
from emur.repositories.base import PersistenceError
from emur.repositories.health import ReminderRepository
from emur.repositories.media import ReminderMediaRepository
from emur.schemas.reminder import ReminderForm
from emur.services.base import BaseService
from emur.services.media_service import MediaService, UploadedFile

logger = logging.getLogger(__name__)


class ReminderService(BaseService):
    def __init__(self, db, media: MediaService):
        super().__init__(db)
        self.media = media
        self.reminders = ReminderRepository(db)
        self.reminder_media = ReminderMediaRepository(db)

    def list_for_user(self, claims) -> List[Reminder]:
        user = self.requester(claims)
        return self.reminders.list_for_user(user.id)

    @staticmethod
    def media_urls(reminder: Reminder) -> List[str]:
        return [link.media.media_url for link in reminder.media_links]

    def create(self, claims, form: ReminderForm, uploads: List[UploadedFile]) -> Reminder:
        user = self.requester(claims)
        reminder = Reminder(user_id=user.id, is_active=True, **form.model_dump())
        try:
            self.reminders.create_with_omit(reminder, "uuid")
            self._attach(reminder, uploads)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating reminder", e)
        self.db.refresh(reminder)
        logger.info(f"[Reminder] Created {reminder.uuid} with {len(uploads)} file(s)")
        return reminder

    def update(self, claims, reminder_uuid: UUID, form: ReminderForm, uploads: List[UploadedFile]) -> Reminder:
        reminder = self._owned(claims, reminder_uuid)
        for field, value in form.model_dump().items():
            setattr(reminder, field, value)
        stale_urls = []
        try:
            if uploads:
                for upload in uploads:
                    MediaService.validate(upload)
                old_media = self._detach_all(reminder)
                self._attach(reminder, uploads)
                for media in old_media:
                    stale_urls.extend(self.media.remove(media))
            self.reminders.update(reminder)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating reminder", e)
        self.media.purge(stale_urls)
        self.db.refresh(reminder)
        return reminder

    def delete(self, claims, reminder_uuid: UUID) -> None:
        reminder = self._owned(claims, reminder_uuid)
        stale_urls = []
        try:
            for media in self._detach_all(reminder):
                stale_urls.extend(self.media.remove(media))
            self.reminders.delete(reminder)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("deleting reminder", e)
        self.media.purge(stale_urls)
        logger.info(f"[Reminder] Deleted {reminder_uuid}")

    def _owned(self, claims, reminder_uuid: UUID) -> Reminder:
        user = self.requester(claims)
        reminder = self.get_or_404(self.reminders, reminder_uuid, "reminder")
        if reminder.user_id != user.id:
            raise ForbiddenError("user is not authorized to modify the reminder")
        return reminder

    def _attach(self, reminder: Reminder, uploads: List[UploadedFile]) -> None:
        for media in self.media.store_images(uploads):
            link = ReminderMedia(reminder_id=reminder.id, media_id=media.id)
            reminder.media_links.append(link)
            self.reminder_media.create(link)

    def _detach_all(self, reminder: Reminder) -> List[Media]:
        """Remove the join rows and return the media rows they pointed to."""
        media_rows = [link.media for link in reminder.media_links]
        reminder.media_links.clear()
        self.db.flush()
        return media_rows

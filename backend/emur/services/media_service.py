"""
Media Service
Stores uploaded images in object storage and records them as Media rows.

Keys:
    {AWS_FOLDER_NAME}/{uuid}{ext}                  original image
    {AWS_FOLDER_NAME}/{uuid}/{uuid}_thumb{ext}     thumbnail (recipes)
"""

import io
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from PIL import Image, UnidentifiedImageError
from sqlalchemy.orm import Session

from emur.core.config import Settings
from emur.core.constants import ALLOWED_IMAGE_TYPES, CONTENT_TYPE_PNG, THUMBNAIL_SIZE
from emur.core.exceptions import BadRequestError, InternalError
from emur.integrations.storage import ObjectStorage, StorageError
from emur.models.media import Media
from emur.repositories.base import PersistenceError
from emur.repositories.media import MediaRepository
from emur.services.error_logging import error_logger

logger = logging.getLogger(__name__)


@dataclass
class UploadedFile:
    """An uploaded file read into memory by the endpoint."""
    filename: str
    content_type: str
    data: bytes

    @property
    def extension(self) -> str:
        suffix = Path(self.filename or "").suffix.lower()
        if suffix:
            return suffix
        return ".png" if self.content_type == CONTENT_TYPE_PNG else ".jpg"


def make_thumbnail(data: bytes, content_type: str) -> Optional[bytes]:
    """
    Shrink an image to fit THUMBNAIL_SIZE, keeping its aspect ratio.

    Returns None when the bytes are not a readable image.
    """
    try:
        img = Image.open(io.BytesIO(data))
        img.thumbnail(THUMBNAIL_SIZE, Image.Resampling.LANCZOS)
        buffer = io.BytesIO()
        if content_type == CONTENT_TYPE_PNG:
            img.save(buffer, format="PNG")
        else:
            img.convert("RGB").save(buffer, format="JPEG", quality=85)
        return buffer.getvalue()
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"[Media] Could not create thumbnail: {e}")
        return None


class MediaService:
    def __init__(self, db: Session, storage: ObjectStorage, settings: Settings):
        self.db = db
        self.storage = storage
        self.folder = settings.AWS_FOLDER_NAME
        self.media = MediaRepository(db)

    @staticmethod
    def validate(upload: UploadedFile) -> None:
        if upload.content_type not in ALLOWED_IMAGE_TYPES:
            raise BadRequestError("unsupported file type", details={"content_type": upload.content_type})

    def store_image(self, upload: UploadedFile, thumbnail: bool = False) -> Media:
        """
        Upload an image (and optionally its thumbnail) and create its Media row.

        The row is flushed, not committed: the caller commits together with
        the owning entity.

        Raises:
            BadRequestError: content type is not png/jpeg
            InternalError: storage or database failure
        """
        self.validate(upload)

        object_id = uuid.uuid4()
        key = f"{self.folder}/{object_id}{upload.extension}"
        try:
            media_url = self.storage.upload(upload.data, key, upload.content_type)
            media_thumb = None
            if thumbnail:
                thumb_data = make_thumbnail(upload.data, upload.content_type)
                if thumb_data is not None:
                    thumb_key = f"{self.folder}/{object_id}/{object_id}_thumb{upload.extension}"
                    media_thumb = self.storage.upload(thumb_data, thumb_key, upload.content_type)
        except StorageError as e:
            raise InternalError("failed to upload file", details=e.details)

        media = Media(
            media_type=upload.content_type.split("/")[0],
            media_url=media_url,
            media_thumb=media_thumb,
        )
        try:
            return self.media.create(media)
        except PersistenceError as e:
            logger.error(f"[Media] {e}")
            raise InternalError("failed to create media")

    def store_images(self, uploads: Iterable[UploadedFile], thumbnail: bool = False) -> List[Media]:
        uploads = list(uploads)
        for upload in uploads:
            self.validate(upload)
        return [self.store_image(upload, thumbnail=thumbnail) for upload in uploads]

    def remove(self, media: Media) -> List[str]:
        """
        Delete the Media row (flushed, not committed).

        Returns:
            URLs of the stored objects, to pass to purge() once the caller
            has committed
        """
        urls = [url for url in (media.media_url, media.media_thumb) if url]
        try:
            self.media.delete(media)
        except PersistenceError as e:
            logger.error(f"[Media] {e}")
            raise InternalError("failed to delete media")
        return urls

    def purge(self, urls: Iterable[str]) -> None:
        """
        Delete stored objects whose rows are already gone.

        Storage failures are recorded in the error log and skipped, leaving
        at worst an orphaned object in the bucket.
        """
        for url in urls:
            try:
                self.storage.delete(url)
            except StorageError as e:
                error_logger.log_error(e, severity="warning", context={"url": url})

"""
Medical Record Service
One health questionnaire per user; only its owner may update it.
"""

import logging
from uuid import UUID

from emur.core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from emur.models.medical_record import MedicalRecord
from emur.repositories.base import DuplicateRecordError, PersistenceError, RecordNotFoundError
from emur.repositories.health import MedicalRecordRepository
from emur.schemas.medical_record import MedicalRecordCreate, MedicalRecordUpdate
from emur.services.base import BaseService

logger = logging.getLogger(__name__)

ERR_EXISTING_RECORD = "medical record already exists"
ERR_UNAUTHORIZED_UPDATE = "user is not authorized to update the medical record"


class MedicalRecordService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.records = MedicalRecordRepository(db)

    def get_for_user(self, claims) -> MedicalRecord:
        user = self.requester(claims)
        try:
            return self.records.first(MedicalRecord.user_id == user.id)
        except RecordNotFoundError:
            raise NotFoundError("medical record not found")

    def create(self, claims, data: MedicalRecordCreate) -> MedicalRecord:
        user = self.requester(claims)
        record = MedicalRecord(user_id=user.id, **data.model_dump())
        try:
            self.records.create_with_omit(record, "uuid")
            self.commit()
        except DuplicateRecordError:
            raise BadRequestError(ERR_EXISTING_RECORD)
        except PersistenceError as e:
            raise self.persistence_failure("creating medical record", e)
        return record

    def update(self, claims, record_uuid: UUID, data: MedicalRecordUpdate) -> MedicalRecord:
        user = self.requester(claims)
        record = self.get_or_404(self.records, record_uuid, "medical record")
        if record.user_id != user.id:
            logger.warning(f"[MedicalRecord] User {user.uuid} tried to update record {record.uuid}")
            raise ForbiddenError(ERR_UNAUTHORIZED_UPDATE)

        for field, value in data.model_dump().items():
            setattr(record, field, value)
        try:
            self.records.update(record)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating medical record", e)
        return record

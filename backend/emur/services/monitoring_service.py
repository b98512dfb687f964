"""
Monitoring Service
Severity reports for tracked symptoms.

Rules:
- the symptom must exist (400 "symptom not found")
- scale may not exceed symptom.scale (400)
- one monitoring per (user, symptom) (400 "monitoring already exists"),
  checked up front and enforced by the unique constraint
"""

import logging
from typing import List

from emur.core.exceptions import BadRequestError, NotFoundError
from emur.models.monitoring import Monitoring
from emur.repositories.base import DuplicateRecordError, PersistenceError
from emur.repositories.symptom import MonitoringRepository, SymptomRepository
from emur.schemas.symptom import MonitoringCreate
from emur.services.base import BaseService

logger = logging.getLogger(__name__)

ERR_SYMPTOM_NOT_FOUND = "symptom not found"
ERR_INVALID_SCALE = "scale exceeds the symptom maximum"
ERR_EXISTING_MONITORING = "monitoring already exists"


class MonitoringService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.symptoms = SymptomRepository(db)
        self.monitorings = MonitoringRepository(db)

    def list_for_user(self, claims) -> List[Monitoring]:
        user = self.requester(claims)
        return self.monitorings.list_for_user(user.id)

    def create(self, claims, data: MonitoringCreate) -> Monitoring:
        user = self.requester(claims)
        try:
            symptom = self.get_or_404(self.symptoms, data.symptom, "symptom")
        except NotFoundError:
            raise BadRequestError(ERR_SYMPTOM_NOT_FOUND)

        if data.scale > symptom.scale:
            raise BadRequestError(ERR_INVALID_SCALE, details={"max_scale": symptom.scale})

        if self.monitorings.find_item_by_ids(user.id, symptom.id, "user_id", "symptom_id") is not None:
            raise BadRequestError(ERR_EXISTING_MONITORING)

        monitoring = Monitoring(user_id=user.id, symptom_id=symptom.id, scale=data.scale)
        try:
            self.monitorings.create(monitoring)
            self.commit()
        except DuplicateRecordError:
            raise BadRequestError(ERR_EXISTING_MONITORING)
        except PersistenceError as e:
            raise self.persistence_failure("creating monitoring", e)

        logger.info(f"[Monitoring] User {user.uuid} reported {symptom.name}={data.scale}")
        return monitoring

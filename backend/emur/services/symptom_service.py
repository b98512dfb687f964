"""
Symptom Service
Symptom catalog (administrators) and the per-user tracking list.
"""

import logging
from typing import List
from uuid import UUID

from emur.core.exceptions import BadRequestError, NotFoundError
from emur.models.symptom import Symptom, SymptomUser
from emur.repositories.base import DuplicateRecordError, PersistenceError
from emur.repositories.symptom import SymptomRepository, SymptomUserRepository
from emur.schemas.symptom import SymptomCreate
from emur.services.base import BaseService

logger = logging.getLogger(__name__)


class SymptomService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.symptoms = SymptomRepository(db)
        self.symptom_users = SymptomUserRepository(db)

    def list_symptoms(self) -> List[Symptom]:
        return self.symptoms.find(order_by=Symptom.id)

    def create(self, data: SymptomCreate) -> Symptom:
        symptom = Symptom(name=data.name, is_active=data.is_active, scale=data.scale)
        try:
            self.symptoms.create_with_omit(symptom, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating symptom", e)
        logger.info(f"[Symptom] Created {symptom.uuid} ({symptom.name}, scale {symptom.scale})")
        return symptom

    def add_user(self, claims, symptom_uuid: UUID) -> Symptom:
        """Start tracking a symptom. Tracking the same symptom twice is a 400."""
        user = self.requester(claims)
        symptom = self.get_or_404(self.symptoms, symptom_uuid, "symptom")
        try:
            self.symptom_users.create(SymptomUser(user_id=user.id, symptom_id=symptom.id))
            self.commit()
        except DuplicateRecordError:
            raise BadRequestError("symptom already added to user")
        except PersistenceError as e:
            raise self.persistence_failure("adding user to symptom", e)
        return symptom

    def remove_user(self, claims, symptom_uuid: UUID) -> None:
        user = self.requester(claims)
        symptom = self.get_or_404(self.symptoms, symptom_uuid, "symptom")
        link = self.symptom_users.find_item_by_ids(user.id, symptom.id, "user_id", "symptom_id")
        if link is None:
            raise NotFoundError("symptom is not tracked by the user")
        try:
            self.symptom_users.delete(link)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("removing user from symptom", e)

    def list_for_user(self, claims) -> List[Symptom]:
        user = self.requester(claims)
        return [link.symptom for link in self.symptom_users.list_for_user(user.id)]

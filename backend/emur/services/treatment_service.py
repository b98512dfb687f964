"""
Treatment Service
Owner-scoped CRUD for medication plans.
"""

from typing import List
from uuid import UUID

from emur.core.exceptions import ForbiddenError
from emur.models.treatment import Treatment
from emur.repositories.base import PersistenceError
from emur.repositories.health import TreatmentRepository
from emur.schemas.treatment import TreatmentCreate, TreatmentUpdate
from emur.services.base import BaseService


class TreatmentService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.treatments = TreatmentRepository(db)

    def list_for_user(self, claims) -> List[Treatment]:
        user = self.requester(claims)
        return self.treatments.list_for_user(user.id)

    def create(self, claims, data: TreatmentCreate) -> Treatment:
        user = self.requester(claims)
        treatment = Treatment(user_id=user.id, **data.model_dump())
        try:
            self.treatments.create_with_omit(treatment, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating treatment", e)
        return treatment

    def update(self, claims, treatment_uuid: UUID, data: TreatmentUpdate) -> Treatment:
        """Replace every field of an owned treatment."""
        treatment = self._owned(claims, treatment_uuid)
        for field, value in data.model_dump().items():
            setattr(treatment, field, value)
        try:
            self.treatments.update(treatment)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("updating treatment", e)
        return treatment

    def delete(self, claims, treatment_uuid: UUID) -> None:
        treatment = self._owned(claims, treatment_uuid)
        try:
            self.treatments.delete(treatment)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("deleting treatment", e)

    def _owned(self, claims, treatment_uuid: UUID) -> Treatment:
        user = self.requester(claims)
        treatment = self.get_or_404(self.treatments, treatment_uuid, "treatment")
        if treatment.user_id != user.id:
            raise ForbiddenError("user is not authorized to modify the treatment")
        return treatment

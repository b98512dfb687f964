"""Symptom catalog, tracking list and monitoring repositories."""

from typing import List

from sqlalchemy.orm import Session

from emur.models.monitoring import Monitoring
from emur.models.symptom import Symptom, SymptomUser
from emur.repositories.base import Repository


class SymptomRepository(Repository[Symptom]):
    def __init__(self, db: Session):
        super().__init__(db, Symptom)


class SymptomUserRepository(Repository[SymptomUser]):
    def __init__(self, db: Session):
        super().__init__(db, SymptomUser)

    def list_for_user(self, user_id: int) -> List[SymptomUser]:
        return self.find(SymptomUser.user_id == user_id, order_by=SymptomUser.id)


class MonitoringRepository(Repository[Monitoring]):
    def __init__(self, db: Session):
        super().__init__(db, Monitoring)

    def list_for_user(self, user_id: int) -> List[Monitoring]:
        return self.find(Monitoring.user_id == user_id, order_by=Monitoring.date.desc())

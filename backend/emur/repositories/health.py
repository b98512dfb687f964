"""
Repositories for the personal health domain (treatments, records,
reminders) and the shared catalogs (maps, health services, medicals,
forecasts).
"""

from typing import List

from sqlalchemy.orm import Session

from emur.models.forecast import Forecast
from emur.models.health_service import HealthService, HealthServiceRating
from emur.models.map import MapLocation
from emur.models.medical import Medical, MedicalRating
from emur.models.medical_record import MedicalRecord
from emur.models.reminder import Reminder
from emur.models.treatment import Treatment
from emur.repositories.base import Repository


class TreatmentRepository(Repository[Treatment]):
    def __init__(self, db: Session):
        super().__init__(db, Treatment)

    def list_for_user(self, user_id: int) -> List[Treatment]:
        return self.find(Treatment.user_id == user_id, order_by=Treatment.created_at)


class MedicalRecordRepository(Repository[MedicalRecord]):
    def __init__(self, db: Session):
        super().__init__(db, MedicalRecord)


class ReminderRepository(Repository[Reminder]):
    def __init__(self, db: Session):
        super().__init__(db, Reminder)

    def list_for_user(self, user_id: int) -> List[Reminder]:
        return self.find(Reminder.user_id == user_id, order_by=Reminder.date)


class MapRepository(Repository[MapLocation]):
    def __init__(self, db: Session):
        super().__init__(db, MapLocation)


class HealthServiceRepository(Repository[HealthService]):
    def __init__(self, db: Session):
        super().__init__(db, HealthService)


class HealthServiceRatingRepository(Repository[HealthServiceRating]):
    def __init__(self, db: Session):
        super().__init__(db, HealthServiceRating)


class MedicalRepository(Repository[Medical]):
    def __init__(self, db: Session):
        super().__init__(db, Medical)


class MedicalRatingRepository(Repository[MedicalRating]):
    def __init__(self, db: Session):
        super().__init__(db, MedicalRating)


class ForecastRepository(Repository[Forecast]):
    def __init__(self, db: Session):
        super().__init__(db, Forecast)

    def list_for_location(self, country: str, city: str) -> List[Forecast]:
        return self.find(
            Forecast.country == country,
            Forecast.state == city,
            order_by=Forecast.created_at.desc(),
        )

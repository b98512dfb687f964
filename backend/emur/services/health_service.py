"""
Health Service Service
Catalog of health services and their ratings.
"""

from typing import List

from emur.core.exceptions import BadRequestError
from emur.models.health_service import HealthService, HealthServiceRating
from emur.repositories.base import PersistenceError
from emur.repositories.health import HealthServiceRatingRepository, HealthServiceRepository, ReminderRepository
from emur.schemas.health_service import HealthServiceCreate, HealthServiceRatingCreate
from emur.services.base import BaseService


class HealthServiceService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.services = HealthServiceRepository(db)
        self.ratings = HealthServiceRatingRepository(db)
        self.reminders = ReminderRepository(db)

    def list_services(self) -> List[HealthService]:
        return self.services.find(order_by=HealthService.name)

    def create(self, data: HealthServiceCreate) -> HealthService:
        service = HealthService(name=data.name)
        try:
            self.services.create_with_omit(service, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating health service", e)
        return service

    def rate(self, data: HealthServiceRatingCreate) -> HealthServiceRating:
        if not data.health_service_id or not data.reminder_id:
            raise BadRequestError("health_service_id and reminder_id are required")
        service = self.get_by_id_or_404(self.services, data.health_service_id, "health service")
        reminder = self.get_by_id_or_404(self.reminders, data.reminder_id, "reminder")
        rating = HealthServiceRating(
            health_service_id=service.id,
            reminder_id=reminder.id,
            rating=data.rating,
        )
        try:
            self.ratings.create(rating)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("rating health service", e)
        return rating

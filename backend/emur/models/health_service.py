"""
Health Service Models
Catalog of health services and the ratings users give them after an
appointment (linked to the reminder of that appointment).
"""

from sqlalchemy import Column, ForeignKey, Integer, String

from emur.models.base import BaseModel, PublicModel, UpdatedAtMixin


class HealthService(UpdatedAtMixin, PublicModel):
    __tablename__ = "health_services"

    name = Column(String(255), nullable=False)


class HealthServiceRating(BaseModel):
    __tablename__ = "health_services_ratings"

    health_service_id = Column(Integer, ForeignKey("health_services.id", ondelete="CASCADE"), nullable=False, index=True)
    reminder_id = Column(Integer, ForeignKey("reminders.id", ondelete="CASCADE"), nullable=False)
    rating = Column(Integer, nullable=False)

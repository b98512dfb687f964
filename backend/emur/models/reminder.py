"""
Reminder Model
Appointments and to-dos owned by a user, optionally with attached images.

JSON columns:

    notification: [{"days_or_hours": "days", "hours_before": 24}]
    task:         [{"name": "Bring blood tests", "checked": false}]
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from emur.models.base import PublicModel


class Reminder(PublicModel):
    __tablename__ = "reminders"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    notification = Column(JSON, nullable=False, default=list)
    task = Column(JSON, nullable=False, default=list)
    note = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    media_links = relationship("ReminderMedia", lazy="selectin", cascade="all, delete-orphan", passive_deletes=True)

"""
Monitoring Model
Severity reported by a user for one of the catalog symptoms.

At most one row exists per (user, symptom); the unique constraint closes the
race left open by the look-then-write check in the service.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import relationship

from emur.models.base import BaseModel, utcnow


class Monitoring(BaseModel):
    """
    Fields:
        user_id (int): Reporting user
        symptom_id (int): Monitored symptom
        scale (int): Reported severity, never above symptom.scale
        date (datetime): Report date (defaults to now)
    """
    __tablename__ = "monitorings"
    __table_args__ = (
        UniqueConstraint("user_id", "symptom_id", name="uq_monitorings_user_symptom"),
    )

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    symptom_id = Column(Integer, ForeignKey("symptoms.id", ondelete="CASCADE"), nullable=False)
    scale = Column(Integer, nullable=False)
    date = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    symptom = relationship("Symptom", lazy="joined")

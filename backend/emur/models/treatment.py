"""
Treatment Model
Medication plans owned by a user.

Frequency and shots are stored as JSON lists:

    frequency: [{"day": "monday", "time": ["08:00", "20:00"]}]
    shots:     [{"name": "Interferon", "dose": 30}]
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text

from emur.models.base import PublicModel


class Treatment(PublicModel):
    __tablename__ = "treatments"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=True)
    frequency = Column(JSON, nullable=False, default=list)
    shots = Column(JSON, nullable=False, default=list)
    date_start = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)

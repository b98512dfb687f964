"""
Symptom Models
Symptom catalog and the per-user tracking list.

A Symptom defines a maximum severity (scale). Users choose which symptoms
they track through SymptomUser rows and report severities as Monitoring rows
(see emur.models.monitoring).
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from emur.models.base import BaseModel, PublicModel


class Symptom(PublicModel):
    """
    Symptom catalog entry, maintained by administrators.

    Fields:
        name (str): Display name (e.g. "Fatigue")
        is_active (bool): Whether the symptom is offered to users
        scale (int): Maximum severity a monitoring may report
    """
    __tablename__ = "symptoms"

    name = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    scale = Column(Integer, nullable=False, default=0, comment="Maximum reportable severity")


class SymptomUser(BaseModel):
    """Join row: a user tracks a symptom."""
    __tablename__ = "symptom_user"
    __table_args__ = (
        UniqueConstraint("user_id", "symptom_id", name="uq_symptom_user_pair"),
    )

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    symptom_id = Column(Integer, ForeignKey("symptoms.id", ondelete="CASCADE"), nullable=False)

    symptom = relationship("Symptom", lazy="joined")

"""
Medical Record Model
Health-profile questionnaire answered by a user.

One record per user: enforced by a unique user_id. Only the owning user may
update it (checked in MedicalRecordService).
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from emur.models.base import PublicModel, UpdatedAtMixin


class MedicalRecord(UpdatedAtMixin, PublicModel):
    __tablename__ = "medical_records"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)

    health_care_provider = Column(String(255), nullable=True)
    emergency_medical_service = Column(String(255), nullable=True)
    multiple_sclerosis_type = Column(String(255), nullable=True)
    laboral_condition = Column(String(255), nullable=True)
    conmorbidity = Column(Boolean, default=False, nullable=False)
    treating_neurologist = Column(String(255), nullable=True)
    support_network = Column(Boolean, default=False, nullable=False)
    is_disabled = Column(Boolean, default=False, nullable=False)
    educational_level = Column(String(255), nullable=True)

"""
Medical Record Schemas
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class MedicalRecordBase(BaseModel):
    health_care_provider: Optional[str] = None
    emergency_medical_service: Optional[str] = None
    multiple_sclerosis_type: Optional[str] = None
    laboral_condition: Optional[str] = None
    conmorbidity: bool = False
    treating_neurologist: Optional[str] = None
    support_network: bool = False
    is_disabled: bool = False
    educational_level: Optional[str] = None


class MedicalRecordCreate(MedicalRecordBase):
    pass


class MedicalRecordUpdate(MedicalRecordBase):
    pass


class MedicalRecordResponse(MedicalRecordBase):
    uuid: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

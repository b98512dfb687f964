"""
Medical Models
Registry of medical professionals (bulk imported from CSV) and their ratings.
"""

from sqlalchemy import Column, ForeignKey, Integer, String

from emur.models.base import BaseModel, PublicModel


class Medical(PublicModel):
    """
    Fields:
        first_name, last_name (str): Professional name
        cjppu_number (str): Professional board number
        profession_number (str): Profession code
    """
    __tablename__ = "medicals"

    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    cjppu_number = Column(String(100), nullable=True)
    profession_number = Column(String(100), nullable=True)


class MedicalRating(BaseModel):
    __tablename__ = "medical_ratings"

    medical_id = Column(Integer, ForeignKey("medicals.id", ondelete="CASCADE"), nullable=False, index=True)
    reminder_id = Column(Integer, ForeignKey("reminders.id", ondelete="CASCADE"), nullable=False)
    rating = Column(Integer, nullable=False)

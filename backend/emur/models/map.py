"""
Map Model
Points of interest shown on the community map (hospitals, pharmacies,
associations...).

JSON columns:

    hours_availability: [{"day": "monday", "open_time": "09:00", "close_time": "18:00"}]
    phone:              [{"number": "+34 600 000 000"}]
"""

from sqlalchemy import JSON, Boolean, Column, Integer, String

from emur.models.base import PublicModel, UpdatedAtMixin


class MapLocation(UpdatedAtMixin, PublicModel):
    """
    Fields:
        name (str): Display name
        latitude, longitude (str): Coordinates as entered by administrators
        type (int): Location category code
        is_published (bool): Visible to users
    """
    __tablename__ = "maps"

    name = Column(String(255), nullable=False)
    latitude = Column(String(50), nullable=False)
    longitude = Column(String(50), nullable=False)
    type = Column(Integer, nullable=True)
    hours_availability = Column(JSON, nullable=False, default=list)
    phone = Column(JSON, nullable=False, default=list)
    is_published = Column(Boolean, default=False, nullable=False)

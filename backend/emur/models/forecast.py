"""
Forecast Model
Daily weather forecast rows written by the forecast worker.

One row per (location, day) per worker tick; rows are not deduplicated, so
readers pick the most recent rows for a date.
"""

from sqlalchemy import Column, Float, Integer, String

from emur.models.base import PublicModel


class Forecast(PublicModel):
    """
    Fields:
        country (str): User country the forecast was requested for
        state (str): User city
        avg_temperature, max_temperature, min_temperature (int): Celsius
        description (str): Short condition category (e.g. "Lluvia")
        humidity (float): Average humidity (%)
        code (int): Provider icon code
        wind (float): Maximum wind (kph)
        uv (int): UV index
        date (str): YYYY-MM-DD
    """
    __tablename__ = "forecasts"

    country = Column(String(255), nullable=False, index=True)
    state = Column(String(255), nullable=False, index=True)
    avg_temperature = Column(Integer, nullable=True)
    max_temperature = Column(Integer, nullable=True)
    min_temperature = Column(Integer, nullable=True)
    description = Column(String(255), nullable=True)
    humidity = Column(Float, nullable=True)
    code = Column(Integer, nullable=True)
    wind = Column(Float, nullable=True)
    uv = Column(Integer, nullable=True)
    date = Column(String(10), nullable=False, comment="YYYY-MM-DD")

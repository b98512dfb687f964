"""
Forecast Service and Worker

The worker polls the forecast provider once per interval (hourly by
default) for every distinct (country, city) pair found among users and
stores one Forecast row per forecast day. Rows are never deduplicated.

Provider condition texts (Spanish) are reduced to short categories by
convert_description(); unknown texts are stored unchanged.
"""

import logging
import threading
from pathlib import PurePosixPath
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from emur.core.config import Settings
from emur.integrations.forecast import ForecastAPIError, ForecastClient
from emur.models.forecast import Forecast
from emur.models.user import User
from emur.repositories.base import PersistenceError
from emur.repositories.health import ForecastRepository
from emur.repositories.user import UserRepository
from emur.schemas.forecast import ForecastDay
from emur.services.error_logging import error_logger

logger = logging.getLogger(__name__)


# ============================================================================
# Condition text mapping
# ============================================================================

_DESCRIPTION_GROUPS = {
    "Nublado": (
        "Parcialmente nublado",
        "Cielo cubierto",
    ),
    "Lluvia": (
        "Lluvia  moderada a intervalos",
        "Lluvias ligeras a intervalos",
        "Ligeras lluvias",
        "Periodos de lluvia moderada",
        "Lluvia moderada",
        "Periodos de fuertes lluvias",
        "Fuertes lluvias",
        "Ligeras lluvias heladas",
        "Lluvias heladas fuertes o moderadas",
        "Ligeras precipitaciones",
        "Lluvias fuertes o moderadas",
        "Lluvias torrenciales",
    ),
    "Nieve": (
        "Nieve moderada a intervalos en las aproximaciones",
        "Nevadas ligeras a intervalos",
        "Nevadas ligeras",
        "Nieve moderada a intervalos",
        "Nieve moderada",
        "Fuertes nevadas",
        "Nevadas intensas",
        "Ligeras precipitaciones de nieve",
        "Patchy light snow in area with thunder",
        "Nieve moderada con tormenta en la región",
        "Nieve moderada o fuertes nevadas con tormenta en la región",
    ),
    "Aguanieve": (
        "Aguanieve moderada a intervalos en las aproximaciones",
        "Aguanieve fuerte o moderada",
    ),
    "LLovizna": (
        "Llovizna helada a intervalos en las aproximaciones",
        "Llovizna a intervalos",
        "Llovizna helada",
        "Fuerte llovizna helada",
    ),
    "Tormenta": (
        "Cielos tormentosos en las aproximaciones",
        "Intervalos de lluvias ligeras con tomenta en la región",
        "Lluvias con tormenta fuertes o moderadas en la región",
    ),
    "Chubascos": (
        "Chubascos de nieve",
        "Ligeros chubascos de aguanieve",
        "Chubascos de aguanieve fuertes o moderados",
    ),
    "Nieblina": (
        "Niebla moderada",
    ),
    "Granizo": (
        "Ligeros chubascos acompañados de granizo",
        "Chubascos fuertes o moderados acompañados de granizo",
    ),
}

DESCRIPTION_MAP = {text: short for short, texts in _DESCRIPTION_GROUPS.items() for text in texts}


def convert_description(text: str) -> str:
    """Short category for a provider condition text (exact match)."""
    return DESCRIPTION_MAP.get(text, text)


def icon_code(icon: str) -> int:
    """
    Numeric code from the icon file name.

    Example:
        >>> icon_code("//cdn.weatherapi.com/weather/64x64/day/302.png")
        302
    """
    try:
        return int(PurePosixPath(icon).stem)
    except ValueError:
        return 0


def build_forecast(country: str, city: str, forecast_day: ForecastDay) -> Forecast:
    day = forecast_day.day
    return Forecast(
        country=country,
        state=city,
        avg_temperature=int(day.avgtemp_c),
        max_temperature=int(day.maxtemp_c),
        min_temperature=int(day.mintemp_c),
        humidity=day.avghumidity,
        code=icon_code(day.condition.icon),
        description=convert_description(day.condition.text),
        wind=day.maxwind_kph,
        uv=int(day.uv),
        date=forecast_day.date,
    )


# ============================================================================
# Service
# ============================================================================

class ForecastService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.forecasts = ForecastRepository(db)

    def distinct_locations(self):
        return self.users.distinct_locations()

    def create_forecast(self, forecast: Forecast) -> Forecast:
        self.forecasts.create_with_omit(forecast, "uuid")
        self.db.commit()
        return forecast

    def list_for_user(self, user: User) -> List[Forecast]:
        """Forecast rows stored for the user's location (empty without one)."""
        if not user.country or not user.city:
            return []
        return self.forecasts.list_for_location(user.country, user.city)


# ============================================================================
# Worker
# ============================================================================

class ForecastWorker:
    """
    Hourly forecast poller.

    Args:
        session_factory: SQLAlchemy session factory shared with the API
        client: ForecastClient (or any object with get_forecast(lang, city, country))
        settings: FORECAST_LANG and FORECAST_INTERVAL_SECONDS are read from it
    """

    def __init__(self, session_factory: Callable[[], Session], client: ForecastClient, settings: Settings):
        self.session_factory = session_factory
        self.client = client
        self.lang = settings.FORECAST_LANG
        self.interval = settings.FORECAST_INTERVAL_SECONDS

    def check_forecast(self) -> int:
        """
        Run one polling pass.

        Locations whose provider call fails are logged and skipped; the pass
        continues with the next one.

        Returns:
            Number of Forecast rows inserted
        """
        db = self.session_factory()
        inserted = 0
        try:
            service = ForecastService(db)
            locations = service.distinct_locations()
            logger.info(f"[Forecast Worker] Checking {len(locations)} location(s)")

            for country, city in locations:
                try:
                    payload = self.client.get_forecast(self.lang, city, country)
                except ForecastAPIError as e:
                    error_logger.log_error(e, severity="error", context={"country": country, "city": city})
                    continue

                for forecast_day in payload.forecast.forecastday:
                    try:
                        service.create_forecast(build_forecast(country, city, forecast_day))
                        inserted += 1
                    except PersistenceError as e:
                        error_logger.log_error(
                            e, severity="error",
                            context={"country": country, "city": city, "date": forecast_day.date},
                        )
        finally:
            db.close()

        logger.info(f"[Forecast Worker] Stored {inserted} forecast row(s)")
        return inserted

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        """
        Poll now and then every interval until stop_event is set.
        """
        stop_event = stop_event or threading.Event()
        logger.info(f"[Forecast Worker] Started (interval {self.interval}s)")
        while not stop_event.is_set():
            try:
                self.check_forecast()
            except Exception as e:
                error_logger.log_error(e, severity="critical", context={"worker": "forecast"})
            stop_event.wait(self.interval)
        logger.info("[Forecast Worker] Stopped")

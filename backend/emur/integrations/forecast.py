"""
Forecast API HTTP Client

Synchronous client for the weatherapi.com forecast endpoint, used by the
forecast worker thread.

The request URL is FORECAST_API with the query appended:

    {FORECAST_API}lang=es&key=...&q={city},{country}&days=3
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from emur.core.config import Settings
from emur.schemas.forecast import ForecastPayload

logger = logging.getLogger(__name__)


class ForecastAPIError(Exception):
    """Exception raised when the forecast provider call fails."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ForecastClient:
    """
    HTTP client for the forecast provider.

    Attributes:
        base_url (str): FORECAST_API, ending with "?" or "&"
        api_key (str): FORECAST_KEY
        days (int): Days requested per call
        timeout (float): Request timeout in seconds
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = settings.FORECAST_API
        self.api_key = settings.FORECAST_KEY
        self.days = settings.FORECAST_DAYS
        self.timeout = settings.FORECAST_TIMEOUT
        self.transport = transport

    def build_url(self, lang: str, city: str, country: str) -> str:
        location = f"{quote(city, safe='')},{quote(country, safe='')}"
        return f"{self.base_url}lang={lang}&key={self.api_key}&q={location}&days={self.days}"

    def get_forecast(self, lang: str, city: str, country: str) -> ForecastPayload:
        """
        Fetch the daily forecast for a location.

        Raises:
            ForecastAPIError: transport failure, non-200 status or undecodable body
        """
        url = self.build_url(lang, city, country)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(url)
        except httpx.HTTPError as e:
            raise ForecastAPIError(f"[GetForecast]: cannot fetch URL, {e}") from e

        if response.status_code != httpx.codes.OK:
            raise ForecastAPIError(
                f"[GetForecast]: unexpected http GET status, {response.status_code}",
                status_code=response.status_code,
                details=response.text[:500],
            )

        try:
            return ForecastPayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ForecastAPIError(f"[GetForecast]: cannot decode JSON, {e}") from e

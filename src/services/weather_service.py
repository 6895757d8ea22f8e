from typing import Any, Dict, Type

import httpx
import structlog
from pydantic import ValidationError

from src.config.config import config
from src.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    GeocodeHttpError,
    InvalidResponseError,
    NetworkError,
    WeatherHttpError,
)
from src.models.weather.weather import GeoResult
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)

GEOCODE_PATH = "/geo/1.0/direct"
WEATHER_PATH = "/data/2.5/weather"


class WeatherService(Singleton):
    """
    Client for the OpenWeatherMap geocoding and current weather endpoints.

    Each public method issues exactly one GET request. Failures are raised as
    typed exceptions carrying the HTTP status where one was received; there is
    no retrying.
    """

    def __init__(self):
        """Initialize the weather service."""
        super().__init__()

        if hasattr(self, "_weather_initialized"):
            return

        self.base_url = config.openweather_base_url
        self.api_key = config.openweather_api_key
        self.units = config.openweather_units
        self.lang = config.openweather_lang

        self.timeout = httpx.Timeout(
            config.http_timeout_seconds, connect=config.http_connect_timeout_seconds
        )

        self._weather_initialized = True

    async def _make_request(
        self, path: str, params: Dict[str, Any], error_class: Type[APIRequestError]
    ) -> Any:
        """
        Make a GET request to the OpenWeatherMap API.

        Args:
            path: Endpoint path appended to the base URL
            params: Query parameters, without the API key
            error_class: Exception raised for non-2xx responses

        Returns:
            Decoded JSON response body

        Raises:
            APIRequestError: error_class, for any non-2xx response
            NetworkError: If no response was received
            InvalidResponseError: If a 2xx body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        params = {**params, "appid": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                logger.info("Making API request", url=url, params=params)
                response = await client.get(url, params=params)

        except httpx.TransportError as e:
            logger.warning("Request error", url=url, error=str(e))
            raise NetworkError(f"Request to {path} failed: {str(e)}")

        if not 200 <= response.status_code < 300:
            logger.warning(
                "API request failed",
                url=url,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise error_class(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error("API returned a non-JSON body", url=url, error=str(e))
            raise InvalidResponseError(f"Invalid JSON received from {path}: {str(e)}")

    async def geocode(self, city: str) -> GeoResult:
        """
        Resolve a city name to the first matching location.

        Args:
            city: Trimmed, non-empty city name

        Returns:
            GeoResult for the first match

        Raises:
            GeocodeHttpError: For non-2xx responses
            CityNotFoundError: If the lookup succeeded with no matches
            InvalidResponseError: If the first match lacks coordinates or a name
        """
        logger.info("Geocoding city", city=city)
        data = await self._make_request(
            GEOCODE_PATH, {"q": city, "limit": 1}, GeocodeHttpError
        )

        if not isinstance(data, list) or not data:
            logger.info("No geocoding match", city=city)
            raise CityNotFoundError(f"No location found for {city}")

        try:
            geo = GeoResult.model_validate(data[0])
        except ValidationError as e:
            logger.error("Failed to parse geocoding result", city=city, error=str(e))
            raise InvalidResponseError(f"Invalid geocoding data received for {city}: {str(e)}")

        logger.info("Resolved city", city=city, name=geo.name, country=geo.country, lat=geo.lat, lon=geo.lon)
        return geo

    async def get_current_weather(self, lat: float, lon: float) -> Any:
        """
        Get the raw current weather response for a coordinate pair.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Decoded JSON body, unvalidated

        Raises:
            WeatherHttpError: For non-2xx responses
        """
        logger.info("Fetching current weather", lat=lat, lon=lon)
        params = {
            "lat": lat,
            "lon": lon,
            "units": self.units,
            "lang": self.lang,
        }
        return await self._make_request(WEATHER_PATH, params, WeatherHttpError)


weather_service = WeatherService()

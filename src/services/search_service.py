import structlog

from src.exceptions.weather import EmptyQueryError, MissingCredentialError
from src.models.weather.weather import WeatherSummary
from src.services.weather_service import weather_service
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class SearchService(Singleton):
    """
    Orchestrates a city weather search: geocode, then current weather, then summarize.

    Input and credential checks run before any request is made. Each step
    fails fast by raising; callers classify the exception for display.
    """

    def __init__(self):
        super().__init__()

        if hasattr(self, "_search_initialized"):
            return

        self.weather_service = weather_service

        self._search_initialized = True
        logger.info("Search service initialized")

    async def search(self, city: str) -> WeatherSummary:
        """
        Look up the current weather for a free-text city name.

        Args:
            city: User-supplied city name, untrimmed

        Returns:
            WeatherSummary for the first geocoding match

        Raises:
            EmptyQueryError: If city is blank
            MissingCredentialError: If no API key is configured
            CityNotFoundError: If geocoding found no match
            GeocodeHttpError / WeatherHttpError: For non-2xx provider responses
            NetworkError: If the provider could not be reached
        """
        query = (city or "").strip()
        if not query:
            raise EmptyQueryError("City name is empty")

        if not self.weather_service.api_key:
            raise MissingCredentialError("OpenWeatherMap API key is not configured")

        logger.info("Starting weather search", city=query)

        geo = await self.weather_service.geocode(query)
        data = await self.weather_service.get_current_weather(geo.lat, geo.lon)
        summary = WeatherSummary.from_openweather_response(geo, data)

        logger.info(
            "Weather search completed",
            city=query,
            label=summary.city,
            temp=summary.temp,
            description=summary.description,
        )
        return summary


search_service = SearchService()

from src.exceptions.weather.weather_service_error import WeatherServiceError
from src.models.search.error_kind import ErrorKind


class APIRequestError(WeatherServiceError):
    """Exception for non-2xx responses from the OpenWeatherMap API."""

    kind = ErrorKind.HTTP_ERROR
    endpoint = "api"

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"{self.endpoint} request failed with HTTP {status_code}", status_code)


class GeocodeHttpError(APIRequestError):
    """Non-2xx response from the geocoding endpoint."""

    endpoint = "geocode"


class WeatherHttpError(APIRequestError):
    """Non-2xx response from the current weather endpoint."""

    endpoint = "weather"

from src.exceptions.weather.weather_service_error import WeatherServiceError
from src.models.search.error_kind import ErrorKind


class NetworkError(WeatherServiceError):
    """Exception for transport failures where no response was received."""

    kind = ErrorKind.NETWORK_ERROR

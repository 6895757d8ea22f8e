from src.exceptions.weather.weather_service_error import WeatherServiceError
from src.models.search.error_kind import ErrorKind


class EmptyQueryError(WeatherServiceError):
    """Exception for a blank city name."""

    kind = ErrorKind.EMPTY_QUERY


class CityNotFoundError(WeatherServiceError):
    """Exception for a geocoding lookup that succeeded with zero matches."""

    kind = ErrorKind.CITY_NOT_FOUND

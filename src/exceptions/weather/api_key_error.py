from src.exceptions.weather.weather_service_error import WeatherServiceError
from src.models.search.error_kind import ErrorKind


class MissingCredentialError(WeatherServiceError):
    """Exception for a search attempted without a configured API key."""

    kind = ErrorKind.MISSING_CREDENTIAL

from src.exceptions.weather.weather_service_error import WeatherServiceError


class InvalidResponseError(WeatherServiceError):
    """Exception for a 2xx response whose body cannot be used."""

    pass

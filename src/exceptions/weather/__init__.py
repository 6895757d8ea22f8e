from src.exceptions.weather.api_key_error import MissingCredentialError
from src.exceptions.weather.api_request_error import APIRequestError, GeocodeHttpError, WeatherHttpError
from src.exceptions.weather.invalid_city_error import CityNotFoundError, EmptyQueryError
from src.exceptions.weather.invalid_response_error import InvalidResponseError
from src.exceptions.weather.network_error import NetworkError
from src.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "APIRequestError",
    "CityNotFoundError",
    "EmptyQueryError",
    "GeocodeHttpError",
    "InvalidResponseError",
    "MissingCredentialError",
    "NetworkError",
    "WeatherHttpError",
    "WeatherServiceError",
]

from src.exceptions.base import WeatherBotError
from src.exceptions.search import SearchInProgressError
from src.exceptions.weather import WeatherServiceError

__all__ = ["SearchInProgressError", "WeatherBotError", "WeatherServiceError"]

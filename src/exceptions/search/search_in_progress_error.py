from src.exceptions.base import WeatherBotError


class SearchInProgressError(WeatherBotError):
    """Exception raised when a search is submitted while another is in flight."""

    pass

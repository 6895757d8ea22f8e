from typing import Optional

from src.models.search.error_kind import ErrorKind


class WeatherBotError(Exception):
    """
    Base exception for the application.

    Every subclass carries an ErrorKind so failures can be classified from
    the data they hold rather than from their message text.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

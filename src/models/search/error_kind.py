from enum import Enum


class ErrorKind(str, Enum):
    """Categories a failed search is reported under."""

    EMPTY_QUERY = "empty_query"
    MISSING_CREDENTIAL = "missing_credential"
    CITY_NOT_FOUND = "city_not_found"
    INVALID_CREDENTIAL = "invalid_credential"
    RATE_LIMITED = "rate_limited"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    UNKNOWN_ERROR = "unknown_error"

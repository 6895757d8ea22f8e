from typing import Optional

import httpx
import structlog

from src.models.search import ErrorKind, SearchError

logger = structlog.get_logger(__name__)

ERROR_MESSAGES = {
    ErrorKind.EMPTY_QUERY: "Skriv venligst et bynavn først.",
    ErrorKind.MISSING_CREDENTIAL: (
        "Din API-nøgle mangler. Tilføj OPENWEATHER_API_KEY i .env og genstart serveren."
    ),
    ErrorKind.CITY_NOT_FOUND: "Byen blev ikke fundet.",
    ErrorKind.INVALID_CREDENTIAL: (
        "401: API-nøglen er ugyldig/deaktiveret. Forny nøglen hos OpenWeather."
    ),
    ErrorKind.RATE_LIMITED: "429: For mange forespørgsler. Prøv igen senere.",
    ErrorKind.HTTP_ERROR: "{status_code}: Vejrtjenesten svarede med en fejl. Prøv igen.",
    ErrorKind.NETWORK_ERROR: "Netværksfejl. Tjek internetforbindelse/firewall/VPN.",
    ErrorKind.UNKNOWN_ERROR: "Der opstod en fejl. Prøv igen.",
}

HTTP_KINDS = (ErrorKind.INVALID_CREDENTIAL, ErrorKind.RATE_LIMITED, ErrorKind.HTTP_ERROR)


def _kind_for_status(status_code: int) -> ErrorKind:
    # Geocode and weather statuses share the same buckets
    if status_code == 401:
        return ErrorKind.INVALID_CREDENTIAL
    if status_code == 429:
        return ErrorKind.RATE_LIMITED
    return ErrorKind.HTTP_ERROR


def classify_error(exc: BaseException) -> SearchError:
    """
    Map a failed search to its user-facing category and message.

    The decision is made from the kind and HTTP status carried on the
    exception. Exceptions that carry neither, other than raw httpx transport
    errors, are reported as unknown errors.

    Args:
        exc: Exception raised while searching

    Returns:
        SearchError with kind, message and, for HTTP failures, the status code
    """
    kind: Optional[ErrorKind] = getattr(exc, "kind", None)
    status_code: Optional[int] = getattr(exc, "status_code", None)

    if not isinstance(kind, ErrorKind):
        kind = ErrorKind.NETWORK_ERROR if isinstance(exc, httpx.TransportError) else ErrorKind.UNKNOWN_ERROR
        status_code = None

    if kind == ErrorKind.HTTP_ERROR:
        if isinstance(status_code, int):
            kind = _kind_for_status(status_code)
        else:
            kind = ErrorKind.UNKNOWN_ERROR

    if kind not in HTTP_KINDS:
        status_code = None

    message = ERROR_MESSAGES[kind].format(status_code=status_code)

    if kind == ErrorKind.UNKNOWN_ERROR:
        logger.error("Search failed with unclassified error", error=str(exc), error_type=type(exc).__name__)
    else:
        logger.warning("Search failed", kind=kind.value, status_code=status_code, error=str(exc))

    return SearchError(kind=kind, message=message, status_code=status_code)

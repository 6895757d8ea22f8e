import httpx
import pytest

from src.exceptions.weather import (
    CityNotFoundError,
    EmptyQueryError,
    GeocodeHttpError,
    InvalidResponseError,
    MissingCredentialError,
    NetworkError,
    WeatherHttpError,
)
from src.models.search import ErrorKind
from src.services.error_classifier import ERROR_MESSAGES, classify_error


class TestClassifyError:
    """Test cases for mapping failures to user-facing errors."""

    @pytest.mark.parametrize("exc,kind", [
        (EmptyQueryError(), ErrorKind.EMPTY_QUERY),
        (MissingCredentialError(), ErrorKind.MISSING_CREDENTIAL),
        (CityNotFoundError(), ErrorKind.CITY_NOT_FOUND),
        (NetworkError("Connection refused"), ErrorKind.NETWORK_ERROR),
    ])
    def test_pre_request_and_transport_kinds(self, exc, kind):
        error = classify_error(exc)

        assert error.kind == kind
        assert error.message == ERROR_MESSAGES[kind]
        assert error.status_code is None

    @pytest.mark.parametrize("error_class", [GeocodeHttpError, WeatherHttpError])
    def test_401_from_either_endpoint_is_invalid_credential(self, error_class):
        error = classify_error(error_class(401))

        assert error.kind == ErrorKind.INVALID_CREDENTIAL
        assert error.status_code == 401
        assert error.message.startswith("401:")

    @pytest.mark.parametrize("error_class", [GeocodeHttpError, WeatherHttpError])
    def test_429_from_either_endpoint_is_rate_limited(self, error_class):
        error = classify_error(error_class(429))

        assert error.kind == ErrorKind.RATE_LIMITED
        assert error.status_code == 429
        assert error.message.startswith("429:")

    @pytest.mark.parametrize("status_code", [400, 404, 500, 502])
    def test_other_statuses_are_generic_http_errors(self, status_code):
        error = classify_error(WeatherHttpError(status_code))

        assert error.kind == ErrorKind.HTTP_ERROR
        assert error.status_code == status_code
        assert error.message.startswith(f"{status_code}:")

    def test_message_text_is_not_inspected(self):
        """A message mentioning a status does not change the classification."""
        error = classify_error(RuntimeError("WEATHER_HTTP_429"))

        assert error.kind == ErrorKind.UNKNOWN_ERROR

    def test_raw_transport_error_is_network_error(self):
        error = classify_error(httpx.ConnectError("Name or service not known"))

        assert error.kind == ErrorKind.NETWORK_ERROR

    @pytest.mark.parametrize("exc", [ValueError("boom"), KeyError("main"), InvalidResponseError("bad body")])
    def test_anything_else_is_unknown(self, exc):
        error = classify_error(exc)

        assert error.kind == ErrorKind.UNKNOWN_ERROR
        assert error.message == ERROR_MESSAGES[ErrorKind.UNKNOWN_ERROR]
        assert error.status_code is None

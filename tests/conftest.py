from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.models.weather.weather import GeoResult, WeatherSummary
from src.services.search_service import SearchService
from src.services.weather_service import WeatherService


@pytest.fixture
def mock_config():
    """Config stand-in for the weather service."""
    mock_config = MagicMock()
    mock_config.openweather_api_key = "test-weather-key"
    mock_config.openweather_base_url = "https://api.openweathermap.org"
    mock_config.openweather_units = "metric"
    mock_config.openweather_lang = "da"
    mock_config.http_timeout_seconds = 30.0
    mock_config.http_connect_timeout_seconds = 10.0
    return mock_config


@pytest.fixture
def weather_service(mock_config):
    """Fresh WeatherService built from mock_config."""
    WeatherService.reset_instance()
    with patch('src.services.weather_service.config', mock_config):
        service = WeatherService()
    yield service
    WeatherService.reset_instance()


@pytest.fixture
def search_service(weather_service):
    """Fresh SearchService wired to the fresh WeatherService."""
    SearchService.reset_instance()
    service = SearchService()
    service.weather_service = weather_service
    yield service
    SearchService.reset_instance()


@pytest.fixture
def copenhagen_geocode_response():
    """Geocoding response body for Copenhagen."""
    return [{"lat": 55.67, "lon": 12.57, "name": "Copenhagen", "country": "DK"}]


@pytest.fixture
def copenhagen_weather_response():
    """Current weather response body for Copenhagen."""
    return {
        "main": {"temp": 10.4, "humidity": 80},
        "wind": {"speed": 3.2},
        "weather": [{"icon": "01d", "description": "clear sky"}],
    }


@pytest.fixture
def copenhagen_geo():
    return GeoResult(lat=55.67, lon=12.57, name="Copenhagen", country="DK")


@pytest.fixture
def copenhagen_summary():
    return WeatherSummary(
        city="Copenhagen, DK",
        temp=10,
        icon="01d",
        description="clear sky",
        wind=3,
        humidity=80,
    )


@pytest.fixture
def make_response():
    """Factory for stand-ins of httpx.Response."""

    def _make_response(status_code=200, json_data=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        response.json.return_value = json_data
        return response

    return _make_response


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and yield (client_class_mock, client_mock)."""
    with patch('httpx.AsyncClient') as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client_class, mock_client


@pytest.fixture
def mock_search_service():
    """Search service stand-in used by the session and the routes."""
    mock_service = MagicMock()
    mock_service.search = AsyncMock()
    return mock_service

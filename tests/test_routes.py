from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import app
from src.exceptions.weather import (
    CityNotFoundError,
    EmptyQueryError,
    GeocodeHttpError,
    MissingCredentialError,
    NetworkError,
    WeatherHttpError,
)
from src.models.weather.weather import WeatherSummary


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def patched_search_service(mock_search_service):
    with patch('src.services.search_session.search_service', mock_search_service):
        yield mock_search_service


class TestSearchApi:
    """Test cases for POST /api/v1/weather/search."""

    def test_success(self, client, patched_search_service, copenhagen_summary):
        patched_search_service.search.return_value = copenhagen_summary

        response = client.post("/api/v1/weather/search", json={"city": "Copenhagen"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["error"] is None
        assert body["summary"] == {
            "city": "Copenhagen, DK",
            "temp": 10,
            "icon": "01d",
            "description": "clear sky",
            "wind": 3,
            "humidity": 80,
            "icon_url": "https://openweathermap.org/img/wn/01d@2x.png",
        }

    @pytest.mark.parametrize("exc,status_code,kind", [
        (EmptyQueryError(), 400, "empty_query"),
        (MissingCredentialError(), 503, "missing_credential"),
        (CityNotFoundError(), 404, "city_not_found"),
        (GeocodeHttpError(401), 502, "invalid_credential"),
        (WeatherHttpError(429), 429, "rate_limited"),
        (WeatherHttpError(500), 502, "http_error"),
        (NetworkError("Connection refused"), 503, "network_error"),
        (ValueError("boom"), 500, "unknown_error"),
    ])
    def test_failures(self, client, patched_search_service, exc, status_code, kind):
        patched_search_service.search.side_effect = exc

        response = client.post("/api/v1/weather/search", json={"city": "Copenhagen"})

        assert response.status_code == status_code
        body = response.json()
        assert body["status"] == "failed"
        assert body["summary"] is None
        assert body["error"]["kind"] == kind
        assert body["error"]["message"]

    def test_token_required_when_configured(self, client, patched_search_service, copenhagen_summary):
        patched_search_service.search.return_value = copenhagen_summary

        with patch('src.api.auth.config') as mock_config:
            mock_config.api_token = "secret"
            missing = client.post("/api/v1/weather/search", json={"city": "Copenhagen"})
            wrong = client.post(
                "/api/v1/weather/search",
                json={"city": "Copenhagen"},
                headers={"Authorization": "Bearer nope"},
            )
            ok = client.post(
                "/api/v1/weather/search",
                json={"city": "Copenhagen"},
                headers={"Authorization": "Bearer secret"},
            )

        assert missing.status_code == 401
        assert wrong.status_code == 401
        assert ok.status_code == 200


class TestSearchPage:
    """Test cases for the HTML search form."""

    def test_empty_form(self, client, patched_search_service):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'name="city"' in response.text
        patched_search_service.search.assert_not_called()

    def test_renders_summary(self, client, patched_search_service, copenhagen_summary):
        patched_search_service.search.return_value = copenhagen_summary

        response = client.get("/", params={"city": "Copenhagen"})

        assert response.status_code == 200
        assert "<h2>Copenhagen, DK</h2>" in response.text
        assert "10&deg;C" in response.text
        assert "clear sky" in response.text
        assert "Vind: 3 m/s" in response.text
        assert "Fugt: 80%" in response.text
        assert "https://openweathermap.org/img/wn/01d@2x.png" in response.text

    def test_omits_missing_fields(self, client, patched_search_service):
        patched_search_service.search.return_value = WeatherSummary(city="Copenhagen")

        response = client.get("/", params={"city": "Copenhagen"})

        assert "<img" not in response.text
        assert "&deg;C" not in response.text
        assert "Vind:" not in response.text
        assert "Fugt:" not in response.text

    def test_renders_error(self, client, patched_search_service):
        patched_search_service.search.side_effect = CityNotFoundError()

        response = client.get("/", params={"city": "Atlantis"})

        assert response.status_code == 200
        assert '<p class="error">Byen blev ikke fundet.</p>' in response.text

    def test_escapes_text(self, client, patched_search_service):
        patched_search_service.search.return_value = WeatherSummary(
            city="<script>alert(1)</script>", description="<b>sky</b>"
        )

        response = client.get("/", params={"city": "<script>"})

        assert "<script>" not in response.text
        assert "&lt;script&gt;" in response.text
        assert "&lt;b&gt;sky&lt;/b&gt;" in response.text


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert "api_key_configured" in response.json()

from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field

from src.config.config import config
from src.utils.parsing import finite_number_or_none, get_path, round_half_up, string_or_empty


class GeoResult(BaseModel):
    """First match of an OpenWeatherMap direct geocoding lookup."""

    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")
    name: str = Field(..., description="Resolved place name")
    country: Optional[str] = Field(None, description="Country code (e.g., DK, GB)")

    @property
    def label(self) -> str:
        """Composite location label: "name, country" or just the name."""
        if self.country:
            return f"{self.name}, {self.country}"
        return self.name


class WeatherSummary(BaseModel):
    """Display-ready current weather for one resolved location."""

    city: str = Field(..., description="Location label")
    temp: Optional[int] = Field(None, description="Temperature in Celsius, rounded")
    icon: str = Field(default="", description="Weather icon code")
    description: str = Field(default="", description="Weather description")
    wind: Optional[int] = Field(None, description="Wind speed in m/s, rounded")
    humidity: Optional[int] = Field(None, description="Humidity percentage")

    @computed_field
    @property
    def icon_url(self) -> Optional[str]:
        if not self.icon:
            return None
        return config.openweather_icon_url.format(icon=self.icon)

    @classmethod
    def from_openweather_response(cls, geo: GeoResult, data: Any) -> "WeatherSummary":
        """
        Create a WeatherSummary from a current weather API response.

        Every field is read defensively: missing or non-numeric measurements
        become None and missing condition text becomes an empty string, so a
        partial response never fails the search.

        Args:
            geo: Geocoding match the weather was requested for
            data: Decoded JSON body of the current weather endpoint

        Returns:
            WeatherSummary: Display-ready summary
        """
        temp = finite_number_or_none(get_path(data, "main", "temp"))
        humidity = finite_number_or_none(get_path(data, "main", "humidity"))
        wind = finite_number_or_none(get_path(data, "wind", "speed"))

        return cls(
            city=geo.label,
            temp=round_half_up(temp),
            icon=string_or_empty(get_path(data, "weather", 0, "icon")),
            description=string_or_empty(get_path(data, "weather", 0, "description")),
            wind=round_half_up(wind),
            humidity=round_half_up(humidity),
        )

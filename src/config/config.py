from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    The OpenWeatherMap API key is read once at process start. It is allowed to
    be empty here: a missing key is reported to the user when a search is
    attempted rather than preventing the application from starting.
    """

    # API Keys
    openweather_api_key: str = Field(default="", description="OpenWeatherMap API key for weather data")

    # OpenWeatherMap Configuration
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org", description="OpenWeatherMap API base URL"
    )
    openweather_units: str = Field(default="metric", description="Temperature units (metric/imperial)")
    openweather_lang: str = Field(default="da", description="Language of weather descriptions")
    openweather_icon_url: str = Field(
        default="https://openweathermap.org/img/wn/{icon}@2x.png",
        description="Template for weather icon image URLs",
    )

    # HTTP client Configuration
    http_timeout_seconds: float = Field(default=30.0, gt=0, description="Total HTTP timeout")
    http_connect_timeout_seconds: float = Field(default=10.0, gt=0, description="HTTP connect timeout")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")
    api_token: Optional[str] = Field(default=None, description="API authentication token")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")

    @field_validator("openweather_api_key")
    def strip_openweather_api_key(cls, v):
        return v.strip()

    @field_validator("openweather_base_url")
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    @property
    def has_api_key(self) -> bool:
        return bool(self.openweather_api_key)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()

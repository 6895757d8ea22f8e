from src.models.weather.weather import GeoResult, WeatherSummary

__all__ = ["GeoResult", "WeatherSummary"]

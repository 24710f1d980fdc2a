"""Weather forecast - entries, temperature parsing and the cached service.

Parsing is in forecast.py, the cache slot in cache.py and the service in service.py.
"""

from farmhand.weather.cache import ForecastCache
from farmhand.weather.forecast import (
    DEFAULT_HIGH,
    DEFAULT_LOW,
    ForecastEntry,
    Temperature,
    forecast_from_record,
    parse_temperature,
)
from farmhand.weather.service import WeatherService

__all__ = [
    "ForecastCache",
    "ForecastEntry",
    "Temperature",
    "DEFAULT_HIGH",
    "DEFAULT_LOW",
    "forecast_from_record",
    "parse_temperature",
    "WeatherService",
]

"""Forecast entries from the ``weather_c`` table and their temperature parsing."""

import json
from dataclasses import dataclass, field

from farmhand.core.fields import DomainRecord

# Used whenever the backend's temperature field can't be read as a high/low pair
DEFAULT_HIGH = 75
DEFAULT_LOW = 60


@dataclass(frozen=True)
class Temperature(DomainRecord):
    high: float = DEFAULT_HIGH
    low: float = DEFAULT_LOW


@dataclass(frozen=True)
class ForecastEntry(DomainRecord):
    id: int
    date: str | None = None
    condition: str = "sunny"
    humidity: float = 0
    precipitation: float = 0
    temperature: Temperature = field(default_factory=Temperature)


def _is_number(value) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _temperature_from_mapping(value) -> Temperature | None:
    if not isinstance(value, dict):
        return None
    high, low = value.get("high"), value.get("low")
    if not (_is_number(high) and _is_number(low)):
        return None
    return Temperature(high=high, low=low)


def parse_temperature(raw) -> Temperature:
    """
    Read the backend's weakly-typed temperature field.

    The field is either text holding a JSON object like '{"high":80,"low":65}'
    or an already-decoded mapping. Anything else, including malformed JSON,
    yields the default Temperature(75, 60). Never raises.

    Args:
        raw: Value of ``temperature_c`` as returned by the backend

    Returns:
        Temperature with high and low values
    """
    if isinstance(raw, str) and "{" in raw:
        try:
            decoded = json.loads(raw)
        except (ValueError, RecursionError):
            return Temperature()
        return _temperature_from_mapping(decoded) or Temperature()
    return _temperature_from_mapping(raw) or Temperature()


def forecast_from_record(item: dict) -> ForecastEntry:
    return ForecastEntry(
        id=item.get("Id"),
        date=item.get("date_c"),
        condition=item.get("condition_c") or "sunny",
        humidity=item.get("humidity_c") or 0,
        precipitation=item.get("precipitation_c") or 0,
        temperature=parse_temperature(item.get("temperature_c")),
    )

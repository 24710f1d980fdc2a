"""Weather forecast service backed by the ``weather_c`` table."""

import dataclasses
import logging

from farmhand.core.client import get_record_client
from farmhand.core.fields import order_by
from farmhand.core.notify import Notifier, log_notifier
from farmhand.core.service import ClientFactory, RecordReader
from farmhand.weather.cache import ForecastCache
from farmhand.weather.forecast import ForecastEntry, forecast_from_record

logger = logging.getLogger(__name__)


class WeatherService(RecordReader):
    """Read-only forecast access with a 30-minute in-memory cache.

    Concurrent callers that find the cache expired may each fetch; the last
    write wins.
    """

    table = "weather_c"
    fields = ("condition_c", "date_c", "humidity_c", "precipitation_c", "temperature_c")
    label = "weather forecast"

    def __init__(
        self,
        client_factory: ClientFactory = get_record_client,
        notifier: Notifier = log_notifier,
        cache: ForecastCache | None = None,
    ):
        super().__init__(client_factory, notifier)
        self.cache = cache if cache is not None else ForecastCache()

    def from_record(self, record: dict) -> ForecastEntry:
        return forecast_from_record(record)

    async def get_forecast(self) -> list[ForecastEntry]:
        """Get forecast entries ordered by ascending date.

        Served from the cache while it is fresh. A failed refresh returns []
        and leaves the cache untouched.
        """
        cached = self.cache.get()
        if cached is not None:
            return cached

        entries = await self._read(
            lambda client: client.fetch_records(
                self.table,
                self.field_selection(),
                order_by=order_by("date_c", "ASC"),
            ),
            self._map_all,
        )
        if entries is None:
            return []
        return self.cache.store(entries)

    async def get_current_weather(self) -> ForecastEntry | None:
        """Get the soonest forecast entry, or None if there is none."""
        try:
            forecast = await self.get_forecast()
        except Exception:
            logger.exception("Error fetching current weather")
            return None
        if not forecast:
            return None
        return dataclasses.replace(forecast[0])

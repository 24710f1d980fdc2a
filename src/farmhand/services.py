"""Composition root: one shared instance of each entity service."""

from dataclasses import dataclass
from functools import lru_cache

from farmhand.core.client import get_record_client
from farmhand.core.notify import Notifier, log_notifier
from farmhand.core.service import ClientFactory
from farmhand.data.crops import CropService
from farmhand.data.expenses import ExpenseService
from farmhand.data.farms import FarmService
from farmhand.data.tasks import TaskService
from farmhand.weather.cache import ForecastCache
from farmhand.weather.service import WeatherService


@dataclass
class FarmServices:
    crops: CropService
    expenses: ExpenseService
    farms: FarmService
    tasks: TaskService
    weather: WeatherService

    @classmethod
    def build(
        cls,
        client_factory: ClientFactory = get_record_client,
        notifier: Notifier = log_notifier,
        forecast_cache: ForecastCache | None = None,
    ) -> "FarmServices":
        """Wire every service to the same record client factory and notifier."""
        return cls(
            crops=CropService(client_factory, notifier),
            expenses=ExpenseService(client_factory, notifier),
            farms=FarmService(client_factory, notifier),
            tasks=TaskService(client_factory, notifier),
            weather=WeatherService(client_factory, notifier, cache=forecast_cache),
        )


@lru_cache
def get_services() -> FarmServices:
    """Get the process-wide services, built from settings on first use.

    The forecast cache lives as long as this instance.
    """
    return FarmServices.build()

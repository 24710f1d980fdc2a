"""Farmhand data-access services.

This package wraps the Apper record storage backend used by the farm
management app, translating backend records into domain entities.

Subpackages:
- farmhand.core: Configuration, record client and service base classes
- farmhand.data: Crops, expenses, farms and tasks
- farmhand.weather: Forecast entries and the cached weather service
"""

# Re-export common items for convenience
from farmhand.core import (
    MutationError,
    RecordClient,
    ServiceUnavailableError,
    get_record_client,
    settings,
)
from farmhand.services import FarmServices, get_services

__all__ = [
    "settings",
    "RecordClient",
    "get_record_client",
    "MutationError",
    "ServiceUnavailableError",
    "FarmServices",
    "get_services",
]

__version__ = "0.1.0"

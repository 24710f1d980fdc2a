"""Core module - configuration, record client and service base classes."""

from farmhand.core import client, fields
from farmhand.core.client import (
    MutationError,
    RecordClient,
    RecordClientError,
    ServiceUnavailableError,
    get_record_client,
)
from farmhand.core.config import settings
from farmhand.core.fields import (
    EmbeddedKey,
    ForeignKey,
    ScalarKey,
    coerce_float,
    coerce_int,
    foreign_key_id,
    parse_foreign_key,
)
from farmhand.core.notify import Notifier, log_notifier
from farmhand.core.service import FarmScopedService, RecordReader, RecordService

__all__ = [
    "client",
    "fields",
    "settings",
    "RecordClient",
    "get_record_client",
    "RecordClientError",
    "MutationError",
    "ServiceUnavailableError",
    "RecordReader",
    "RecordService",
    "FarmScopedService",
    "Notifier",
    "log_notifier",
    # Field helpers
    "coerce_int",
    "coerce_float",
    "ForeignKey",
    "ScalarKey",
    "EmbeddedKey",
    "parse_foreign_key",
    "foreign_key_id",
]

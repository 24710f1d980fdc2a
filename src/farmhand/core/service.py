"""Base classes for entity services over Apper record tables.

Reads and writes follow two different failure contracts:

- Reads (``get_all``, ``get_by_id``, ``get_by_farm_id``) never raise. Any
  failure is logged and an empty list or None is returned.
- Mutations (``create``, ``update``, ``delete``) log the failure, send a
  user-facing notification and raise ``MutationError``.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from farmhand.core.client import (
    MutationError,
    RecordClient,
    RecordClientError,
    ServiceUnavailableError,
    get_record_client,
)
from farmhand.core.fields import coerce_int, equal_to, select_fields
from farmhand.core.notify import Notifier, log_notifier, send_notification

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], RecordClient | None]


@dataclass
class BatchOutcome:
    """Per-record results of a mutation, split by success."""

    successful: list[dict] = field(default_factory=list)
    failed: list[dict] = field(default_factory=list)
    notified: int = 0


class RecordReader:
    """Read-only access to one record table.

    Subclasses set ``table``, ``fields``, ``label`` and implement ``from_record``.
    """

    table: str = ""
    fields: tuple[str, ...] = ()
    label: str = "records"  # plural noun used in log messages

    def __init__(
        self,
        client_factory: ClientFactory = get_record_client,
        notifier: Notifier = log_notifier,
    ):
        self.client_factory = client_factory
        self.notifier = notifier

    def from_record(self, record: dict):
        raise NotImplementedError

    def field_selection(self) -> list[dict]:
        return select_fields(*self.fields)

    async def _read(
        self,
        request: Callable[[RecordClient], Awaitable[dict]],
        transform: Callable,
    ):
        """Run one read request. Returns the transformed data, or None on any failure."""
        client = self.client_factory()
        if client is None:
            logger.error("Record client not available; cannot fetch %s", self.label)
            return None

        try:
            response = await request(client)
            if not response.get("success"):
                logger.error("Error fetching %s: %s", self.label, response.get("message"))
                return None
            return transform(response.get("data"))
        except Exception:
            logger.exception("Error fetching %s", self.label)
            return None

    def _map_all(self, data) -> list:
        return [self.from_record(item) for item in data or []]

    async def get_all(self) -> list:
        """Fetch every record in the table. Returns [] on failure."""
        result = await self._read(
            lambda client: client.fetch_records(self.table, self.field_selection()),
            self._map_all,
        )
        return result if result is not None else []

    async def get_by_id(self, record_id):
        """Fetch one record by id. Returns None if missing or on failure."""

        async def request(client: RecordClient) -> dict:
            return await client.get_record_by_id(self.table, coerce_int(record_id), self.field_selection())

        return await self._read(request, lambda data: self.from_record(data) if data else None)


class RecordService(RecordReader):
    """Full CRUD access to one record table.

    Subclasses also implement ``to_create_record`` and ``to_update_record``.
    """

    def to_create_record(self, data: dict) -> dict:
        raise NotImplementedError

    def to_update_record(self, record_id: int, data: dict) -> dict:
        raise NotImplementedError

    def _notify(self, message: str) -> None:
        send_notification(self.notifier, message)

    async def _mutate(
        self,
        action: str,
        request: Callable[[RecordClient], Awaitable[dict]],
    ) -> BatchOutcome:
        """Run one mutation request and split its per-record results.

        Raises:
            ServiceUnavailableError: If no record client is configured
            MutationError: On transport failure or an unsuccessful response
        """
        client = self.client_factory()
        if client is None:
            logger.error("Record client not available; cannot %s %s", action, self.label)
            error = ServiceUnavailableError()
            self._notify(error.message)
            raise error

        try:
            response = await request(client)
        except RecordClientError as e:
            logger.error("Error trying to %s %s: %s", action, self.label, e)
            self._notify(str(e))
            raise MutationError(str(e)) from e

        if not response.get("success"):
            message = response.get("message") or f"{action.capitalize()} operation failed"
            logger.error("Failed to %s %s: %s", action, self.label, message)
            self._notify(message)
            raise MutationError(message)

        outcome = BatchOutcome()
        for result in response.get("results") or []:
            if result.get("success"):
                outcome.successful.append(result)
            else:
                outcome.failed.append(result)

        if outcome.failed:
            outcome.notified = self._report_failures(action, outcome.failed)
        return outcome

    def _report_failures(self, action: str, failed: list[dict]) -> int:
        """Log failed records and notify once per field error and record message.

        Returns the number of notifications sent.
        """
        logger.error("Failed to %s %d %s: %s", action, len(failed), self.label, failed)
        sent = 0
        for record in failed:
            for error in record.get("errors") or []:
                label = error.get("fieldLabel", "")
                detail = error.get("message") or error.get("error") or "invalid value"
                self._notify(f"{label}: {detail}")
                sent += 1
            if record.get("message"):
                self._notify(record["message"])
                sent += 1
        return sent

    def _operation_failed(self, action: str, outcome: BatchOutcome) -> MutationError:
        message = f"{action.capitalize()} operation failed"
        if not outcome.notified:
            self._notify(message)
        return MutationError(message, failed=outcome.failed)

    async def create(self, data: dict):
        """Create one record from domain attributes and return the stored entity.

        Raises:
            MutationError: If the backend rejects the record
        """
        record = self.to_create_record(data)
        outcome = await self._mutate(
            "create",
            lambda client: client.create_record(self.table, [record]),
        )
        if outcome.successful:
            return self.from_record(outcome.successful[0].get("data") or {})
        raise self._operation_failed("create", outcome)

    async def update(self, record_id, data: dict):
        """Update one record and return the stored entity.

        Raises:
            MutationError: If the backend rejects the update
        """
        record = self.to_update_record(coerce_int(record_id), data)
        outcome = await self._mutate(
            "update",
            lambda client: client.update_record(self.table, [record]),
        )
        if outcome.successful:
            return self.from_record(outcome.successful[0].get("data") or {})
        raise self._operation_failed("update", outcome)

    async def delete(self, record_id) -> bool:
        """Delete one record.

        Returns:
            True if the backend confirmed the deletion, False if it reported
            the record as not deleted

        Raises:
            MutationError: On transport failure or an unsuccessful response
        """
        record_ids = [coerce_int(record_id)]
        outcome = await self._mutate(
            "delete",
            lambda client: client.delete_record(self.table, record_ids),
        )
        return len(outcome.successful) > 0


class FarmScopedService(RecordService):
    """Record service for tables related to a farm through ``farm_id_c``."""

    async def get_by_farm_id(self, farm_id) -> list:
        """Fetch the records belonging to one farm. Returns [] on failure."""

        async def request(client: RecordClient) -> dict:
            return await client.fetch_records(
                self.table,
                self.field_selection(),
                where=equal_to("farm_id_c", coerce_int(farm_id)),
            )

        result = await self._read(request, self._map_all)
        return result if result is not None else []

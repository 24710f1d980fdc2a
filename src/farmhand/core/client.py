"""Apper record storage client - generic CRUD over named record tables."""

import logging

import httpx

from farmhand.core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class RecordClientError(Exception):
    """Raised when a record client request fails at the transport or HTTP level."""

    pass


class MutationError(Exception):
    """Raised when a create, update or delete operation fails.

    Attributes:
        message: Human-readable failure message (from the backend where available)
        failed: Per-record results that reported failure, if any
    """

    def __init__(self, message: str, failed: list[dict] | None = None):
        self.message = message
        self.failed = failed or []
        super().__init__(message)


class ServiceUnavailableError(MutationError):
    """Raised when a mutation is attempted without a configured record client."""

    def __init__(self, message: str = "Service unavailable"):
        super().__init__(message)


# =============================================================================
# Client
# =============================================================================


class RecordClient:
    """Async client for the Apper record storage API.

    Every method returns the parsed JSON envelope from the backend, which
    always carries a ``success`` flag and, on failure, a ``message``.
    Reads add ``data``; mutations add per-record ``results``.
    """

    def __init__(
        self,
        project_id: str,
        public_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.project_id = project_id
        self.public_key = public_key
        self.base_url = (base_url or settings.apper_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout

    async def _request(self, method: str, path: str, payload: dict) -> dict:
        """Send one request and return the decoded JSON body.

        Raises:
            RecordClientError: On connection errors, timeouts, non-2xx responses
                and bodies that are not a JSON object
        """
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    method,
                    url,
                    headers={
                        "x-project-id": self.project_id,
                        "x-api-key": self.public_key,
                        "Content-Type": "application/json",
                    },
                    json=payload,
                    timeout=self.timeout,
                )
                response.raise_for_status()
                body = response.json()
                if not isinstance(body, dict):
                    raise RecordClientError(f"Unexpected response body: {body!r:.200}")
                return body
        except httpx.TimeoutException as e:
            raise RecordClientError(f"Request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            try:
                body = e.response.text
            except Exception:
                body = "(unable to read response body)"
            raise RecordClientError(f"HTTP {e.response.status_code}: {body}") from e
        except httpx.HTTPError as e:
            raise RecordClientError(f"Request failed: {e}") from e
        except ValueError as e:
            raise RecordClientError(f"Invalid JSON response: {e}") from e

    async def fetch_records(
        self,
        table: str,
        fields: list[dict],
        where: list[dict] | None = None,
        order_by: list[dict] | None = None,
    ) -> dict:
        """Fetch records from a table.

        Args:
            table: Record table name (e.g. "crop_c")
            fields: Field selection, see ``farmhand.core.fields.select_fields``
            where: Optional filter conditions
            order_by: Optional ordering

        Returns:
            Envelope with ``data`` holding a list of raw records
        """
        payload: dict = {"fields": fields}
        if where:
            payload["where"] = where
        if order_by:
            payload["orderBy"] = order_by
        return await self._request("POST", f"/tables/{table}/records/query", payload)

    async def get_record_by_id(self, table: str, record_id: int, fields: list[dict]) -> dict:
        """Fetch a single record by id. ``data`` holds the raw record."""
        return await self._request("POST", f"/tables/{table}/records/{record_id}/query", {"fields": fields})

    async def create_record(self, table: str, records: list[dict]) -> dict:
        """Create a batch of records."""
        return await self._request("POST", f"/tables/{table}/records", {"records": records})

    async def update_record(self, table: str, records: list[dict]) -> dict:
        """Update a batch of records. Each record must carry its ``Id``."""
        return await self._request("PUT", f"/tables/{table}/records", {"records": records})

    async def delete_record(self, table: str, record_ids: list[int]) -> dict:
        """Delete a batch of records by id."""
        return await self._request("DELETE", f"/tables/{table}/records", {"RecordIds": record_ids})


def get_record_client() -> RecordClient | None:
    """Build a record client from settings.

    Returns None when the Apper credentials are not configured.
    """
    if not settings.apper_project_id or not settings.apper_public_key:
        logger.debug("Apper credentials not configured; record client unavailable")
        return None
    return RecordClient(settings.apper_project_id, settings.apper_public_key)

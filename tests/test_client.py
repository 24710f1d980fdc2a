"""Tests for the Apper record client."""

import json

import httpx
import pytest

from farmhand.core import client
from farmhand.core.client import RecordClientError
from farmhand.core.fields import equal_to, order_by, select_fields


class TestFetchRecords:
    """Tests for the fetch_records method."""

    async def test_sends_credentials_in_headers(self, mock_records_api, record_client):
        """Verify project id and key are sent with every request."""
        route = mock_records_api.post("/tables/crop_c/records/query").mock(
            return_value=httpx.Response(200, json={"success": True, "data": []})
        )

        await record_client.fetch_records("crop_c", select_fields("crop_type_c"))

        request = route.calls[0].request
        assert request.headers["x-project-id"] == "test-project"
        assert request.headers["x-api-key"] == "test-key"
        assert request.headers["content-type"] == "application/json"

    async def test_sends_fields_filter_and_ordering(self, mock_records_api, record_client):
        """Verify field selection, where and orderBy are sent in the body."""
        route = mock_records_api.post("/tables/task_c/records/query").mock(
            return_value=httpx.Response(200, json={"success": True, "data": []})
        )

        await record_client.fetch_records(
            "task_c",
            select_fields("title_c"),
            where=equal_to("farm_id_c", 7),
            order_by=order_by("date_c"),
        )

        body = json.loads(route.calls[0].request.content)
        assert body["fields"] == [{"field": {"Name": "Name"}}, {"field": {"Name": "title_c"}}]
        assert body["where"] == [{"FieldName": "farm_id_c", "Operator": "EqualTo", "Values": [7]}]
        assert body["orderBy"] == [{"fieldName": "date_c", "sorttype": "ASC"}]

    async def test_omits_empty_filter_and_ordering(self, mock_records_api, record_client):
        """Verify optional parameters are left out of the body when not given."""
        route = mock_records_api.post("/tables/farm_c/records/query").mock(
            return_value=httpx.Response(200, json={"success": True, "data": []})
        )

        await record_client.fetch_records("farm_c", select_fields("name_c"))

        body = json.loads(route.calls[0].request.content)
        assert "where" not in body
        assert "orderBy" not in body

    async def test_returns_response_envelope(self, mock_records_api, record_client):
        """Verify the decoded JSON envelope is returned as is."""
        envelope = {"success": False, "message": "Table not found"}
        mock_records_api.post("/tables/crop_c/records/query").mock(return_value=httpx.Response(200, json=envelope))

        result = await record_client.fetch_records("crop_c", select_fields())

        assert result == envelope

    async def test_raises_on_http_error(self, mock_records_api, record_client):
        """Verify HTTP errors are raised as RecordClientError with the body."""
        mock_records_api.post("/tables/crop_c/records/query").mock(
            return_value=httpx.Response(500, text="upstream exploded")
        )

        with pytest.raises(RecordClientError, match="HTTP 500: upstream exploded"):
            await record_client.fetch_records("crop_c", select_fields())

    async def test_raises_on_connection_error(self, mock_records_api, record_client):
        """Verify transport failures are raised as RecordClientError."""
        mock_records_api.post("/tables/crop_c/records/query").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(RecordClientError, match="refused"):
            await record_client.fetch_records("crop_c", select_fields())

    async def test_raises_on_timeout(self, mock_records_api, record_client):
        """Verify timeouts are raised as RecordClientError."""
        mock_records_api.post("/tables/crop_c/records/query").mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(RecordClientError, match="timed out"):
            await record_client.fetch_records("crop_c", select_fields())

    async def test_raises_on_invalid_json(self, mock_records_api, record_client):
        """Verify a non-JSON body is raised as RecordClientError."""
        mock_records_api.post("/tables/crop_c/records/query").mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(RecordClientError, match="Invalid JSON"):
            await record_client.fetch_records("crop_c", select_fields())

    async def test_raises_on_non_object_body(self, mock_records_api, record_client):
        """Verify a JSON body that is not an object is raised as RecordClientError."""
        mock_records_api.post("/tables/crop_c/records").mock(return_value=httpx.Response(200, json=[]))

        with pytest.raises(RecordClientError, match="Unexpected response body"):
            await record_client.create_record("crop_c", [{"Name": "Corn"}])

    async def test_does_not_retry(self, mock_records_api, record_client):
        """Verify a failed request is attempted exactly once."""
        route = mock_records_api.post("/tables/crop_c/records/query").mock(return_value=httpx.Response(503))

        with pytest.raises(RecordClientError):
            await record_client.fetch_records("crop_c", select_fields())

        assert route.call_count == 1


class TestRecordMutations:
    """Tests for get-by-id, create, update and delete requests."""

    async def test_get_record_by_id_uses_record_path(self, mock_records_api, record_client):
        """Verify the record id is part of the path."""
        route = mock_records_api.post("/tables/farm_c/records/3/query").mock(
            return_value=httpx.Response(200, json={"success": True, "data": {"Id": 3}})
        )

        result = await record_client.get_record_by_id("farm_c", 3, select_fields("name_c"))

        assert route.called
        assert result["data"]["Id"] == 3

    async def test_create_record_posts_records(self, mock_records_api, record_client):
        """Verify created records are sent under "records"."""
        route = mock_records_api.post("/tables/farm_c/records").mock(
            return_value=httpx.Response(200, json={"success": True, "results": []})
        )

        await record_client.create_record("farm_c", [{"Name": "North"}])

        assert json.loads(route.calls[0].request.content) == {"records": [{"Name": "North"}]}

    async def test_update_record_uses_put(self, mock_records_api, record_client):
        """Verify updates are sent with PUT."""
        route = mock_records_api.put("/tables/farm_c/records").mock(
            return_value=httpx.Response(200, json={"success": True, "results": []})
        )

        await record_client.update_record("farm_c", [{"Id": 1, "Name": "North"}])

        assert json.loads(route.calls[0].request.content) == {"records": [{"Id": 1, "Name": "North"}]}

    async def test_delete_record_sends_record_ids(self, mock_records_api, record_client):
        """Verify deletes send RecordIds in the body."""
        route = mock_records_api.delete("/tables/task_c/records").mock(
            return_value=httpx.Response(200, json={"success": True, "results": [{"success": True}]})
        )

        await record_client.delete_record("task_c", [4])

        assert json.loads(route.calls[0].request.content) == {"RecordIds": [4]}


class TestGetRecordClient:
    """Tests for the get_record_client factory."""

    def test_returns_none_without_credentials(self):
        """Verify the client is unavailable when credentials are missing."""
        original = client.settings.apper_project_id
        client.settings.apper_project_id = None

        try:
            assert client.get_record_client() is None
        finally:
            client.settings.apper_project_id = original

    def test_builds_client_from_settings(self):
        """Verify credentials and URL are taken from settings."""
        original_id = client.settings.apper_project_id
        original_key = client.settings.apper_public_key
        client.settings.apper_project_id = "proj"
        client.settings.apper_public_key = "key"

        try:
            record_client = client.get_record_client()
            assert record_client is not None
            assert record_client.project_id == "proj"
            assert record_client.public_key == "key"
            assert record_client.base_url == client.settings.apper_api_url.rstrip("/")
        finally:
            client.settings.apper_project_id = original_id
            client.settings.apper_public_key = original_key

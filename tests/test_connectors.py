"""Tests for the connector layer.

Tests cover:
- Authentication strategies and request policy
- Status-code to error mapping
- HubSpotConnector request building against httpx.MockTransport
- DummyHubSpotConnector functionality

No network calls - all tests are offline.
"""

import asyncio
import json
from urllib.parse import parse_qs

import httpx
import pytest

from hubspot_mcp.connectors import (
    ApiKeyAuth,
    AuthenticationError,
    ConfigurationError,
    ConnectionError,
    ConnectorError,
    DummyHubSpotConnector,
    DummyResponse,
    HubSpotConnector,
    RateLimitError,
    RemoteError,
    RequestPolicy,
    ResourceNotFoundError,
    ServiceUnavailableError,
    TimeoutError,
    build_query,
    error_for_status,
)


def make_connector(handler, access_token="test-token"):
    """HubSpotConnector whose HTTP calls are served by ``handler``."""
    return HubSpotConnector(
        access_token=access_token,
        base_url="https://hubspot.test",
        transport=httpx.MockTransport(handler),
    )


def recording_handler(status_code=200, body=None):
    """MockTransport handler returning a fixed reply and recording requests."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, json=body if body is not None else {})

    return handler, seen


# =============================================================================
# Authentication and Policy Tests
# =============================================================================


class TestAuth:
    """Tests for auth strategies."""

    def test_bearer_token(self):
        """ApiKeyAuth sends a bearer token."""
        auth = ApiKeyAuth(api_key="pat-123")
        assert auth.get_headers() == {"Authorization": "Bearer pat-123"}

    def test_missing_token_not_configured(self):
        """An empty token is reported as not configured."""
        auth = ApiKeyAuth(api_key="")
        assert auth.is_configured() is False
        assert auth.get_headers() == {}


class TestRequestPolicy:
    """Tests for RequestPolicy."""

    def test_json_content_type(self):
        """Requests are sent as JSON by default."""
        assert RequestPolicy().default_headers["Content-Type"] == "application/json"


# =============================================================================
# Error Mapping Tests
# =============================================================================


class TestErrorForStatus:
    """Tests for error_for_status."""

    @pytest.mark.parametrize(
        "status,error_class",
        [
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, ResourceNotFoundError),
            (429, RateLimitError),
            (500, ServiceUnavailableError),
            (503, ServiceUnavailableError),
            (400, RemoteError),
        ],
    )
    def test_status_mapping(self, status, error_class):
        """Each status maps to its RemoteError subclass."""
        error = error_for_status(status, "msg", "body", connector_name="HubSpot")
        assert type(error) is error_class
        assert error.status_code == status
        assert error.body == "body"

    def test_hierarchy(self):
        """All remote errors are connector errors."""
        assert issubclass(RemoteError, ConnectorError)
        assert issubclass(ConfigurationError, ConnectorError)


# =============================================================================
# HubSpotConnector Tests
# =============================================================================


class TestBuildQuery:
    """Tests for build_query."""

    def test_properties_repeated(self):
        """Each property is its own query pair."""
        params = build_query(limit=20, properties=["email", "firstname"])
        assert params == [("limit", "20"), ("properties", "email"), ("properties", "firstname")]

    def test_none_values_dropped(self):
        """Absent cursor and extras are omitted."""
        assert build_query(limit=5, after=None, archived=None) == [("limit", "5")]


class TestHubSpotConnector:
    """Tests for HubSpotConnector against a mock transport."""

    def test_missing_token_fails_before_network(self):
        """No token raises ConfigurationError and sends nothing."""
        handler, seen = recording_handler()
        connector = make_connector(handler, access_token=None)

        with pytest.raises(ConfigurationError, match="HUBSPOT_ACCESS_TOKEN not configured"):
            asyncio.run(connector.get_owner("1"))
        assert seen == []

    def test_list_objects_request(self):
        """List issues a GET with limit, cursor and repeated properties."""
        handler, seen = recording_handler(body={"results": []})
        connector = make_connector(handler)

        result = asyncio.run(connector.list_objects("contacts", limit=10, after="abc", properties=["email", "phone"]))

        assert result == {"results": []}
        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/crm/v3/objects/contacts"
        query = parse_qs(request.url.query.decode())
        assert query == {"limit": ["10"], "after": ["abc"], "properties": ["email", "phone"]}
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Content-Type"] == "application/json"

    def test_search_body_sent_verbatim(self):
        """Search POSTs the body unchanged."""
        handler, seen = recording_handler(body={"total": 0, "results": []})
        connector = make_connector(handler)
        body = {"limit": 5, "query": "acme"}

        asyncio.run(connector.search_objects("companies", body))

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/crm/v3/objects/companies/search"
        assert json.loads(seen[0].content) == body

    def test_associate_path(self):
        """Association create PUTs to the labelled v3 path."""
        handler, seen = recording_handler()
        connector = make_connector(handler)

        asyncio.run(connector.associate("deals", "1", "contacts", "2", "deal_to_contact"))

        assert seen[0].method == "PUT"
        assert seen[0].url.path == "/crm/v3/objects/deals/1/associations/contacts/2/deal_to_contact"

    def test_list_associations_uses_v4(self):
        """Association lookup uses the v4 path."""
        handler, seen = recording_handler(body={"results": []})
        connector = make_connector(handler)

        asyncio.run(connector.list_associations("contacts", "7", "emails"))

        assert seen[0].url.path == "/crm/v4/objects/contacts/7/associations/emails"

    def test_batch_read_body(self):
        """Batch read sends inputs and properties."""
        handler, seen = recording_handler(body={"results": []})
        connector = make_connector(handler)

        asyncio.run(connector.batch_read("notes", ["1", "2"], ["hs_note_body"]))

        assert json.loads(seen[0].content) == {
            "inputs": [{"id": "1"}, {"id": "2"}],
            "properties": ["hs_note_body"],
        }

    def test_delete_returns_success(self):
        """DELETE replies are not decoded."""

        def handler(request):
            return httpx.Response(204)

        connector = make_connector(handler)
        assert asyncio.run(connector.delete_object("contacts", "1")) == {"success": True}

    def test_owners_archived_flag(self):
        """archived=true is only sent when requested."""
        handler, seen = recording_handler(body={"results": []})
        connector = make_connector(handler)

        asyncio.run(connector.list_owners(limit=100))
        asyncio.run(connector.list_owners(limit=100, archived=True))

        assert "archived" not in parse_qs(seen[0].url.query.decode())
        assert parse_qs(seen[1].url.query.decode())["archived"] == ["true"]

    def test_remote_error_message(self):
        """Non-2xx replies raise with status and body in the message."""

        def handler(request):
            return httpx.Response(404, text='{"message":"not found"}')

        connector = make_connector(handler)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            asyncio.run(connector.get_object("contacts", "404"))
        assert str(exc_info.value) == 'HubSpot API 404: {"message":"not found"}'
        assert exc_info.value.status_code == 404

    def test_connect_failure(self):
        """Transport connect failures become ConnectionError."""

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        connector = make_connector(handler)

        with pytest.raises(ConnectionError):
            asyncio.run(connector.get_owner("1"))

    def test_timeout(self):
        """Transport timeouts become TimeoutError."""

        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        connector = make_connector(handler)

        with pytest.raises(TimeoutError):
            asyncio.run(connector.get_owner("1"))

    def test_from_config(self, monkeypatch):
        """from_config reads token and base URL from the config object."""
        from hubspot_mcp.config import config

        monkeypatch.setattr(config.hubspot, "access_token", "pat-from-env")
        monkeypatch.setattr(config.hubspot, "api_base", "https://proxy.test")

        connector = HubSpotConnector.from_config()

        assert connector.auth.get_headers() == {"Authorization": "Bearer pat-from-env"}
        assert connector.base_url == "https://proxy.test"


# =============================================================================
# DummyHubSpotConnector Tests
# =============================================================================


class TestDummyHubSpotConnector:
    """Tests for DummyHubSpotConnector."""

    def test_canned_response(self):
        """Canned data is returned for the matching call."""
        connector = DummyHubSpotConnector()
        connector.set_response("GET", "/crm/v3/owners/1", {"id": "1", "email": "a@b.c"})

        assert asyncio.run(connector.get_owner("1")) == {"id": "1", "email": "a@b.c"}
        assert connector.was_called("GET", "/crm/v3/owners/1")

    def test_canned_error(self):
        """Canned errors are raised."""
        connector = DummyHubSpotConnector()
        connector.set_response(
            "GET",
            "/crm/v3/owners/1",
            DummyResponse(error=ResourceNotFoundError("gone", "dummy", 404)),
        )

        with pytest.raises(ResourceNotFoundError):
            asyncio.run(connector.get_owner("1"))

    def test_call_log(self):
        """Calls are logged in issue order with their bodies."""
        connector = DummyHubSpotConnector()
        asyncio.run(connector.create_object("notes", {"hs_note_body": "hi"}))
        asyncio.run(connector.delete_object("notes", "1"))

        assert connector.calls() == [
            ("POST", "/crm/v3/objects/notes"),
            ("DELETE", "/crm/v3/objects/notes/1"),
        ]
        assert connector.get_call_log()[0]["json"] == {"properties": {"hs_note_body": "hi"}}

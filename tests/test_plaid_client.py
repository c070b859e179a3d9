"""Tests for the httpx-based Plaid client."""

import json
import httpx
import pytest

from bankdash.config import PlaidConfig
from bankdash.domain.errors import UpstreamError
from bankdash.plaid.client import PlaidClient


CONFIG = PlaidConfig(base_url="https://sandbox.plaid.test", client_id="cid", secret="shh")


def _client(handler):
    return PlaidClient(CONFIG, transport=httpx.MockTransport(handler))


def _recording(response_body, status_code=200):
    """Return a handler replying with response_body and the list of requests it saw."""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(status_code, json=response_body)

    return handler, seen


def test_accounts_request_and_response():
    """Test accounts/get body and snapshot mapping."""
    handler, seen = _recording(
        {"accounts": [{"account_id": "acc-1"}], "item": {"institution_id": "ins_3"}}
    )

    with _client(handler) as client:
        snapshot = client.get_accounts("access-123")

    request = seen[0]
    assert request.method == "POST"
    assert request.url == "https://sandbox.plaid.test/accounts/get"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "access_token": "access-123",
        "client_id": "cid",
        "secret": "shh",
    }
    assert snapshot.accounts == [{"account_id": "acc-1"}]
    assert snapshot.institution_id == "ins_3"


def test_accounts_missing_fields():
    """Test that missing accounts and item produce an empty snapshot."""
    handler, _ = _recording({})

    with _client(handler) as client:
        snapshot = client.get_accounts("access-123")

    assert snapshot.accounts == []
    assert snapshot.institution_id is None


def test_institution_request():
    """Test institutions/get_by_id body."""
    handler, seen = _recording({"institution": {"institution_id": "ins_3", "name": "Chase"}})

    with _client(handler) as client:
        institution = client.get_institution("ins_3", ("US",))

    assert seen[0].url.path == "/institutions/get_by_id"
    body = json.loads(seen[0].content)
    assert body["institution_id"] == "ins_3"
    assert body["country_codes"] == ["US"]
    assert institution["name"] == "Chase"


def test_institution_missing_in_body():
    """Test that a body without an institution is an upstream error."""
    handler, _ = _recording({"request_id": "r1"})

    with _client(handler) as client:
        with pytest.raises(UpstreamError, match="no institution"):
            client.get_institution("ins_3", ("US",))


def test_sync_request_and_page():
    """Test transactions/sync body and page mapping."""
    handler, seen = _recording(
        {
            "added": [{"transaction_id": "t-1"}],
            "modified": [],
            "removed": [],
            "next_cursor": "cursor-2",
            "has_more": True,
        }
    )

    with _client(handler) as client:
        page = client.sync_transactions("access-123", "cursor-1")

    body = json.loads(seen[0].content)
    assert seen[0].url.path == "/transactions/sync"
    assert body["cursor"] == "cursor-1"
    assert body["access_token"] == "access-123"
    assert page.added == [{"transaction_id": "t-1"}]
    assert page.next_cursor == "cursor-2"
    assert page.has_more is True


def test_sync_null_cursor_defaults_to_empty():
    handler, _ = _recording({"added": None, "next_cursor": None, "has_more": False})

    with _client(handler) as client:
        page = client.sync_transactions("access-123")

    assert page.added == []
    assert page.next_cursor == ""
    assert page.has_more is False


def test_error_status_raises_with_plaid_detail():
    """Test that a 4xx response includes Plaid's error code and message."""
    handler, _ = _recording(
        {"error_code": "ITEM_LOGIN_REQUIRED", "error_message": "the login details have changed"},
        status_code=400,
    )

    with _client(handler) as client:
        with pytest.raises(UpstreamError) as exc_info:
            client.get_accounts("access-123")

    message = str(exc_info.value)
    assert "/accounts/get" in message
    assert "400" in message
    assert "ITEM_LOGIN_REQUIRED" in message


def test_server_error_without_json():
    """Test that a 5xx response with a non-JSON body still raises."""

    def handler(request):
        return httpx.Response(503, text="Service Unavailable")

    with _client(handler) as client:
        with pytest.raises(UpstreamError, match="503"):
            client.sync_transactions("access-123")


def test_transport_error_raises():
    """Test that network failures become UpstreamError."""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(UpstreamError, match="request failed"):
            client.get_accounts("access-123")


def test_invalid_json_raises():
    """Test that an unparseable success body becomes UpstreamError."""

    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with _client(handler) as client:
        with pytest.raises(UpstreamError, match="invalid JSON"):
            client.get_accounts("access-123")


def test_non_object_json_raises():
    handler, _ = _recording([1, 2, 3])

    with _client(handler) as client:
        with pytest.raises(UpstreamError, match="unexpected body"):
            client.get_accounts("access-123")

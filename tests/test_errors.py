import pytest

from epic_dashboard.core.errors import (
    HttpError,
    NetworkError,
    classify_http_error,
    extract_server_messages,
)


def test_status_zero_mentions_vpn():
    assert "VPN" in classify_http_error(0)


def test_not_found():
    assert "not found" in classify_http_error(404)


@pytest.mark.parametrize(
    "status, fragment",
    [(401, "Personal Access Token"), (403, "Forbidden"), (429, "Rate limit")],
)
def test_mapped_statuses(status, fragment):
    assert fragment in classify_http_error(status)


def test_bad_request_joins_server_messages():
    msg = classify_http_error(400, ["Field 'parent' does not exist", "Bad JQL"])
    assert msg == "Invalid request: Field 'parent' does not exist, Bad JQL"
    assert classify_http_error(400) == "Invalid request: Please check the Epic key format."


def test_generic_server_error():
    assert classify_http_error(502, ["Upstream down"]) == "Server error: 502 - Upstream down"
    assert classify_http_error(500, fallback="Internal") == "Server error: 500 - Internal"
    assert classify_http_error(503).startswith("Server error: 503")


def test_http_error_carries_status_and_message():
    exc = HttpError(404, ["Issue does not exist"])
    assert exc.status == 404
    assert exc.server_messages == ["Issue does not exist"]
    assert str(exc) == "Epic not found. Please check the Epic key."


def test_network_error_message():
    assert str(NetworkError("timed out")) == "Network error: timed out"


def test_extract_server_messages():
    assert extract_server_messages({"errorMessages": ["a", "", "b"]}) == ["a", "b"]
    assert extract_server_messages({"errors": {"jql": "bad"}}) == []
    assert extract_server_messages("<html>") == []

from types import SimpleNamespace

import pytest
import requests
from jira import JIRAError

from epic_dashboard.core.errors import HttpError, NetworkError
from epic_dashboard.core.jira_client import JiraAPI
from epic_dashboard.core.models import JiraCredentials


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class DummyAPI(JiraAPI):
    def __init__(self, outcome):
        self.server = "https://jira.example"
        self.session = FakeSession(outcome)
        self.client = SimpleNamespace(_session=self.session)


def test_search_builds_request():
    api = DummyAPI(FakeResponse(payload={"issues": [], "total": 0}))
    data = api.search('parent = ABC-1 OR "Epic Link" = ABC-1')
    assert data == {"issues": [], "total": 0}
    url, params = api.session.calls[0]
    assert url == "https://jira.example/rest/api/2/search"
    assert params["fields"] == "summary,status,labels,assignee,issuetype"
    assert params["maxResults"] == "1000"
    assert params["jql"].startswith("parent = ABC-1")


def test_myself_returns_user():
    api = DummyAPI(FakeResponse(payload={"displayName": "Alice", "emailAddress": "alice@example.com"}))
    user = api.myself()
    assert user.display_name == "Alice"
    assert user.email_address == "alice@example.com"
    assert api.session.calls[0][0] == "https://jira.example/rest/api/2/myself"


def test_error_status_response_translated():
    api = DummyAPI(FakeResponse(status_code=400, payload={"errorMessages": ["Bad JQL"]}))
    with pytest.raises(HttpError) as info:
        api.search("parent = X-1")
    assert info.value.status == 400
    assert str(info.value) == "Invalid request: Bad JQL"


def test_jira_error_translated():
    response = FakeResponse(status_code=404, payload={"errorMessages": ["Issue does not exist"]})
    api = DummyAPI(JIRAError(status_code=404, text="Not Found", response=response))
    with pytest.raises(HttpError) as info:
        api.search("parent = X-1")
    assert info.value.status == 404
    assert "not found" in str(info.value)


def test_connection_failure_maps_to_vpn_hint():
    api = DummyAPI(requests.exceptions.ConnectionError("Name or service not known"))
    with pytest.raises(HttpError) as info:
        api.search("parent = X-1")
    assert info.value.status == 0
    assert "VPN" in str(info.value)


def test_timeout_is_network_error():
    api = DummyAPI(requests.exceptions.ReadTimeout("read timed out"))
    with pytest.raises(NetworkError, match="Network error: read timed out"):
        api.myself()


def test_unreadable_body_is_network_error():
    api = DummyAPI(FakeResponse(status_code=200, payload=None, text="<html>"))
    with pytest.raises(NetworkError):
        api.search("parent = X-1")


def test_constructor_uses_bearer_token():
    api = JiraAPI(JiraCredentials(server="https://jira.example/", token="secret-pat", verify_tls=False))
    assert api.server == "https://jira.example"
    session = api.client._session
    prepared = session.prepare_request(requests.Request("GET", "https://jira.example/rest/api/2/myself"))
    assert prepared.headers["Authorization"] == "Bearer secret-pat"
    assert api.client._session.verify is False

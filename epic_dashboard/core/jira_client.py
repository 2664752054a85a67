"""Jira API client wrapper (REST v2 search + identity, bearer token auth)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import requests
from jira import JIRA, JIRAError

from .config import EPIC_SEARCH_FIELDS, MYSELF_API_PATH, SEARCH_API_PATH, SEARCH_MAX_RESULTS
from .errors import HttpError, NetworkError, extract_server_messages
from .models import JiraCredentials, JiraUser

logger = logging.getLogger(__name__)


def _response_messages(response: Any) -> list[str]:
    if response is None:
        return []
    try:
        payload = response.json()
    except ValueError:
        return []
    return extract_server_messages(payload)


class JiraAPI:
    def __init__(self, credentials: JiraCredentials):
        self.server = credentials.server.rstrip("/")
        options = {"server": self.server, "rest_api_version": "2", "verify": credentials.verify_tls}
        # Retries stay off: a failed fetch is reported to the user as-is.
        self.client = JIRA(
            options=options,
            token_auth=credentials.token or None,
            get_server_info=False,
            max_retries=0,
        )

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        session = getattr(self.client, "_session", None)
        if session is None:
            raise RuntimeError("JIRA session unavailable")
        url = f"{self.server}{path}"
        try:
            resp = session.get(url, params=params)
        except JIRAError as exc:
            status = exc.status_code or 0
            messages = _response_messages(exc.response)
            logger.warning("Jira request to %s failed with status %s", path, status)
            raise HttpError(status, messages, fallback=exc.text) from exc
        except requests.exceptions.ConnectionError as exc:
            logger.warning("Could not connect to Jira at %s: %s", self.server, exc)
            raise HttpError(0) from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("Jira request to %s failed without a response: %s", path, exc)
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc
        if resp.status_code >= 400:
            logger.warning("Jira request to %s failed with status %s", path, resp.status_code)
            raise HttpError(
                resp.status_code,
                _response_messages(resp),
                fallback=(resp.text or "")[:200] or None,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise NetworkError(f"Jira returned an unreadable response for {path}") from exc

    def search(
        self,
        jql: str,
        fields: Sequence[str] | None = None,
        max_results: int = SEARCH_MAX_RESULTS,
    ) -> dict[str, Any]:
        params = {
            "jql": jql,
            "fields": ",".join(fields or EPIC_SEARCH_FIELDS),
            "maxResults": str(max_results),
        }
        logger.debug("Searching Jira with JQL: %s", jql)
        data = self._get_json(SEARCH_API_PATH, params=params)
        if not isinstance(data, dict):
            raise NetworkError("Jira search returned an unexpected payload")
        return data

    def myself(self) -> JiraUser:
        data = self._get_json(MYSELF_API_PATH)
        if not isinstance(data, dict):
            data = {}
        return JiraUser(
            display_name=data.get("displayName"),
            email_address=data.get("emailAddress"),
        )

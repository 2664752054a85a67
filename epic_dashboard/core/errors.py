"""Error taxonomy and user-facing messages for failed Jira calls."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

HTTP_STATUS_MESSAGES: dict[int, str] = {
    0: (
        "Unable to connect to Jira. Please ensure you are connected to the VPN "
        "and restart the dashboard."
    ),
    401: "Unauthorized. Please enter a valid Personal Access Token.",
    403: "Forbidden. You do not have permission to access this Epic or Basic Auth is disabled.",
    404: "Epic not found. Please check the Epic key.",
    429: "Rate limit exceeded. Too many requests to Jira. Please wait a few minutes and try again.",
}
BAD_REQUEST_FALLBACK = "Please check the Epic key format."


class DashboardError(Exception):
    """Base class for errors surfaced to the dashboard as a single message."""


class InvalidFormatError(DashboardError, ValueError):
    """User input is neither an issue key nor a browse URL."""


class NetworkError(DashboardError):
    """The request never produced an HTTP response."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Network error: {detail}")


class HttpError(DashboardError):
    """Jira answered with a failure status."""

    def __init__(
        self,
        status: int,
        server_messages: Iterable[str] | None = None,
        fallback: str | None = None,
    ):
        self.status = status
        self.server_messages = list(server_messages or [])
        super().__init__(classify_http_error(status, self.server_messages, fallback))


class AnalyticsDataError(DashboardError):
    """The static WCAG export is missing or malformed."""


def extract_server_messages(payload: Any) -> list[str]:
    """Pull ``errorMessages`` out of a Jira error body.

    Jira reports validation failures as ``{"errorMessages": [...], "errors": {}}``.
    Anything else (HTML error pages, empty bodies) yields an empty list.
    """
    if not isinstance(payload, dict):
        return []
    messages = payload.get("errorMessages") or []
    if not isinstance(messages, list):
        return []
    return [str(m) for m in messages if m]


def classify_http_error(
    status: int,
    server_messages: Iterable[str] | None = None,
    fallback: str | None = None,
) -> str:
    """Map an HTTP status code to the message shown to the user.

    Parameters
    ----------
    status : int
        HTTP status, ``0`` when no connection could be established.
    server_messages : iterable of str, optional
        Messages reported by Jira in the error body.
    fallback : str, optional
        Transport-level description used for unmapped statuses when Jira
        sent no messages.

    Examples
    --------
    >>> classify_http_error(404)
    'Epic not found. Please check the Epic key.'
    >>> classify_http_error(400, ["Field 'parent' does not exist"])
    "Invalid request: Field 'parent' does not exist"
    """
    joined = ", ".join(server_messages or [])
    if status in HTTP_STATUS_MESSAGES:
        return HTTP_STATUS_MESSAGES[status]
    if status == 400:
        return f"Invalid request: {joined or BAD_REQUEST_FALLBACK}"
    detail = joined or fallback or "Unexpected response from Jira"
    return f"Server error: {status} - {detail}"

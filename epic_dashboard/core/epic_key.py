"""Epic key extraction and JQL construction."""

from __future__ import annotations

import re

from .config import EPIC_JQL_TEMPLATE
from .errors import InvalidFormatError

ISSUE_KEY_RE = re.compile(r"^[A-Z]+-\d+$", re.ASCII)
BROWSE_URL_RE = re.compile(r"browse/([A-Z]+-\d+)", re.ASCII)


def extract_epic_key(value: str | None) -> str:
    """Normalize a raw issue key or a Jira browse URL into an issue key.

    >>> extract_epic_key("https://jira.tools.sap/browse/CXCDC-30694")
    'CXCDC-30694'
    """
    trimmed = (value or "").strip()
    if not trimmed:
        raise InvalidFormatError("Please enter an Epic URL or key")
    if ISSUE_KEY_RE.match(trimmed):
        return trimmed
    match = BROWSE_URL_RE.search(trimmed)
    if match:
        return match.group(1)
    raise InvalidFormatError("Invalid Epic URL or key format")


def build_epic_jql(epic_key: str) -> str:
    return EPIC_JQL_TEMPLATE.format(epic=epic_key)


def issue_url(server: str, key: str) -> str:
    return f"{server.rstrip('/')}/browse/{key}"

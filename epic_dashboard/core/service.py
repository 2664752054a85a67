"""EpicService: orchestrates epic key resolution, fetching, and mapping."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .config import EPIC_SEARCH_FIELDS, SEARCH_MAX_RESULTS
from .epic_key import build_epic_jql, extract_epic_key
from .jira_client import JiraAPI
from .mappers import transform_issues
from .models import IssueView, JiraCredentials, JiraUser

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EpicResult:
    epic_key: str
    issues: list[IssueView] = field(default_factory=list)

    @property
    def empty_message(self) -> str | None:
        if self.issues:
            return None
        return f"No issues found for Epic: {self.epic_key}"


class EpicService:
    def __init__(self, api: JiraAPI):
        self.api = api

    @classmethod
    def from_credentials(cls, credentials: JiraCredentials) -> EpicService:
        return cls(JiraAPI(credentials))

    @property
    def server(self) -> str:
        return self.api.server

    def fetch_epic_issues(
        self,
        epic_input: str,
        *,
        progress: ProgressCallback | None = None,
    ) -> EpicResult:
        """Resolve ``epic_input`` and fetch every issue linked to that Epic.

        Raises ``InvalidFormatError`` before any request is made when the
        input is not a key or browse URL; transport failures surface as
        ``HttpError`` / ``NetworkError`` from the client.
        """
        epic_key = extract_epic_key(epic_input)
        jql = build_epic_jql(epic_key)
        if progress:
            progress(f"Querying issues linked to {epic_key}", None, None)
        response = self.api.search(jql, fields=list(EPIC_SEARCH_FIELDS), max_results=SEARCH_MAX_RESULTS)
        raw_issues = response.get("issues") or []
        total = response.get("total")
        if isinstance(total, int) and total > len(raw_issues):
            logger.warning(
                "Epic %s has %s issues but only %s were returned", epic_key, total, len(raw_issues)
            )
        if progress:
            progress("Preparing issue table", len(raw_issues), len(raw_issues))
        issues = transform_issues(raw_issues)
        logger.debug("Fetched %s issues for %s", len(issues), epic_key)
        return EpicResult(epic_key=epic_key, issues=issues)

    def test_connection(self) -> JiraUser:
        return self.api.myself()

"""Mapping raw Jira search results and WCAG export rows into view models."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from .config import UNASSIGNED_LABEL
from .models import IssueView, WcagIssue


def _nested_name(value: Any, attr: str = "name") -> str | None:
    if not isinstance(value, dict):
        return None
    name = value.get(attr)
    return str(name) if name else None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def map_issue(raw: dict[str, Any]) -> IssueView:
    fields = raw.get("fields") if isinstance(raw, dict) else None
    if not isinstance(fields, dict):
        fields = {}
    labels = fields.get("labels") or []
    if not isinstance(labels, list):
        labels = []
    return IssueView(
        key=_text(raw.get("key") if isinstance(raw, dict) else None),
        summary=_text(fields.get("summary")),
        status=_nested_name(fields.get("status")) or "",
        issuetype=_nested_name(fields.get("issuetype")) or "",
        labels=tuple(str(label) for label in labels if label),
        assignee=_nested_name(fields.get("assignee"), "displayName") or UNASSIGNED_LABEL,
    )


def transform_issues(raw_issues: Iterable[dict[str, Any]] | None) -> list[IssueView]:
    return [map_issue(r) for r in raw_issues or []]


def issues_to_dataframe(issues: Iterable[IssueView]) -> pd.DataFrame:
    rows = []
    for i in issues:
        rows.append(
            {
                "key": i.key,
                "summary": i.summary,
                "status": i.status,
                "labels": ", ".join(i.labels),
                "assignee": i.assignee,
                "issuetype": i.issuetype,
            }
        )
    return pd.DataFrame(rows, columns=["key", "summary", "status", "labels", "assignee", "issuetype"])


def parse_wcag_issue(raw: dict[str, Any]) -> WcagIssue:
    return WcagIssue(
        issue_number=_text(raw.get("issue_number")),
        standard=_text(raw.get("standard")),
        title=_text(raw.get("title")),
        status=_text(raw.get("status")),
    )


def parse_wcag_issues(raw_issues: Iterable[Any]) -> list[WcagIssue]:
    return [parse_wcag_issue(r) for r in raw_issues if isinstance(r, dict)]


def wcag_issues_to_dataframe(issues: Iterable[WcagIssue]) -> pd.DataFrame:
    rows = [
        {
            "key": i.issue_number,
            "standard": i.standard,
            "title": i.title,
            "status": i.status,
        }
        for i in issues
    ]
    return pd.DataFrame(rows, columns=["key", "standard", "title", "status"])

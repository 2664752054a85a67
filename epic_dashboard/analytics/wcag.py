"""WCAG export loading and per-standard completion aggregations."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

import pandas as pd

from epic_dashboard.core.config import ALL_STANDARDS, ANALYTICS_DATA_FILE, SETTINGS
from epic_dashboard.core.errors import AnalyticsDataError
from epic_dashboard.core.mappers import parse_wcag_issues
from epic_dashboard.core.models import AnalyticsSummary, OverallStats, StandardStats, WcagIssue
from epic_dashboard.core.status import completion_percentage, is_completed, is_in_progress

logger = logging.getLogger(__name__)


def load_wcag_issues(path: str | Path | None = None) -> list[WcagIssue]:
    json_path = Path(path or ANALYTICS_DATA_FILE)
    try:
        with json_path.open(encoding="utf-8") as fh:
            payload = json.load(fh)
    except FileNotFoundError as exc:
        raise AnalyticsDataError(f"Analytics export not found: {json_path}") from exc
    except json.JSONDecodeError as exc:
        raise AnalyticsDataError(f"Analytics export is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise AnalyticsDataError("Analytics export must contain a list of issues")
    issues = parse_wcag_issues(payload)
    logger.debug("Loaded %s WCAG issues from %s", len(issues), json_path)
    return issues


def aggregate_standards(issues: Iterable[WcagIssue]) -> AnalyticsSummary:
    """Group issues by standard and compute completion statistics.

    Standards come back sorted by name (case-sensitive). Completed means the
    status falls in the completed category (Done, Cancelled); in progress
    covers In Progress and Development.

    Parameters
    ----------
    issues : iterable of WcagIssue
        Flat issue list as loaded from the export.

    Returns
    -------
    AnalyticsSummary
        Per-standard stats plus global totals. An empty input yields no
        standards and a 0% overall completion.
    """
    items = list(issues)
    if not items:
        return AnalyticsSummary()

    df = pd.DataFrame(
        {
            "standard": [i.standard for i in items],
            "status": [i.status for i in items],
        }
    )
    df["completed"] = df["status"].map(is_completed)
    df["in_progress"] = df["status"].map(is_in_progress)

    stats: list[StandardStats] = []
    for standard, group in df.groupby("standard", sort=False):
        status_counts = {str(k): int(v) for k, v in group["status"].value_counts(sort=False).items()}
        total = int(len(group))
        completed = int(group["completed"].sum())
        stats.append(
            StandardStats(
                standard=str(standard),
                total_items=total,
                status_counts=status_counts,
                completion_percentage=completion_percentage(completed, total),
                issues=tuple(items[pos] for pos in group.index),
            )
        )
    stats.sort(key=lambda s: s.standard)

    total_issues = int(len(df))
    completed_issues = int(df["completed"].sum())
    overall = OverallStats(
        total_issues=total_issues,
        completed_issues=completed_issues,
        in_progress_issues=int(df["in_progress"].sum()),
        overall_completion_percentage=completion_percentage(completed_issues, total_issues),
    )
    return AnalyticsSummary(standards=tuple(stats), overall=overall)


def filter_by_standard(issues: Sequence[WcagIssue], standard: str | None) -> list[WcagIssue]:
    if not standard or standard == ALL_STANDARDS:
        return list(issues)
    return [i for i in issues if i.standard == standard]


def status_distribution(issues: Iterable[WcagIssue]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for issue in issues:
        counts[issue.status] = counts.get(issue.status, 0) + 1
    return counts


def top_standards(summary: AnalyticsSummary, limit: int | None = None) -> list[StandardStats]:
    n = SETTINGS.top_standards_limit if limit is None else limit
    return list(summary.standards[:n])


def standards_to_dataframe(summary: AnalyticsSummary) -> pd.DataFrame:
    rows = [
        {
            "standard": s.standard,
            "total_items": s.total_items,
            "completed_items": s.completed_items,
            "completion_percentage": round(s.completion_percentage, 2),
        }
        for s in summary.standards
    ]
    return pd.DataFrame(
        rows, columns=["standard", "total_items", "completed_items", "completion_percentage"]
    )

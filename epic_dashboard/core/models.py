"""Domain data models for Epic issues, WCAG exports, and aggregate statistics."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import STATUS_CATEGORIES, STATUS_CATEGORY_COMPLETED, UNASSIGNED_LABEL


@dataclass(frozen=True, slots=True)
class JiraCredentials:
    server: str
    token: str | None = None
    verify_tls: bool = True


@dataclass(frozen=True, slots=True)
class JiraUser:
    display_name: str | None
    email_address: str | None


@dataclass(frozen=True, slots=True)
class IssueView:
    key: str
    summary: str
    status: str
    issuetype: str
    labels: tuple[str, ...] = ()
    assignee: str = UNASSIGNED_LABEL


@dataclass(frozen=True, slots=True)
class WcagIssue:
    issue_number: str
    standard: str
    title: str
    status: str


@dataclass(frozen=True, slots=True)
class StandardStats:
    standard: str
    total_items: int
    status_counts: dict[str, int] = field(default_factory=dict)
    completion_percentage: float = 0.0
    issues: tuple[WcagIssue, ...] = ()

    @property
    def completed_items(self) -> int:
        return sum(
            count
            for status, count in self.status_counts.items()
            if STATUS_CATEGORIES.get(status) == STATUS_CATEGORY_COMPLETED
        )


@dataclass(frozen=True, slots=True)
class OverallStats:
    total_issues: int = 0
    completed_issues: int = 0
    in_progress_issues: int = 0
    overall_completion_percentage: float = 0.0


@dataclass(frozen=True, slots=True)
class AnalyticsSummary:
    standards: tuple[StandardStats, ...] = ()
    overall: OverallStats = field(default_factory=OverallStats)

    @property
    def standard_names(self) -> list[str]:
        return [s.standard for s in self.standards]

"""Central configuration, constants, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

# =============================================================================
# Jira Connection Settings
# =============================================================================
JIRA_DEFAULT_SERVER = "https://jira.tools.sap"
SEARCH_API_PATH = "/rest/api/2/search"
MYSELF_API_PATH = "/rest/api/2/myself"

# Fields requested for every Epic child issue search
EPIC_SEARCH_FIELDS: Sequence[str] = (
    "summary",
    "status",
    "labels",
    "assignee",
    "issuetype",
)
SEARCH_MAX_RESULTS: int = 1000

# Newer Jira versions link children through "parent", older ones via "Epic Link"
EPIC_JQL_TEMPLATE = 'parent = {epic} OR "Epic Link" = {epic}'

UNASSIGNED_LABEL = "Unassigned"

# =============================================================================
# Static Analytics Export
# =============================================================================
DATA_DIR = Path(__file__).resolve().parents[2] / "data"
ANALYTICS_DATA_FILE = DATA_DIR / "jiraIssues.json"
ALL_STANDARDS = "all"

# =============================================================================
# Workflow Status Configuration
# =============================================================================
STATUS_CATEGORY_COMPLETED = "completed"
STATUS_CATEGORY_IN_PROGRESS = "in_progress"
STATUS_CATEGORY_TO_DO = "to_do"
STATUS_CATEGORY_BLOCKED = "blocked"
STATUS_CATEGORY_OTHER = "other"

# Raw workflow status -> category. Matching is exact; unmapped statuses fall
# into STATUS_CATEGORY_OTHER.
STATUS_CATEGORIES: dict[str, str] = {
    "Done": STATUS_CATEGORY_COMPLETED,
    "Cancelled": STATUS_CATEGORY_COMPLETED,
    "In Progress": STATUS_CATEGORY_IN_PROGRESS,
    "Development": STATUS_CATEGORY_IN_PROGRESS,
    "To Do": STATUS_CATEGORY_TO_DO,
    "Blocked / On Hold": STATUS_CATEGORY_BLOCKED,
}

STATUS_COLORS: dict[str, str] = {
    "Done": "#4caf50",
    "Development": "#2196f3",
    "In Progress": "#2196f3",
    "To Do": "#ff9800",
    "Blocked / On Hold": "#9e9e9e",
    "Cancelled": "#f44336",
}
DEFAULT_STATUS_COLOR = "#757575"

# (minimum percentage, color), checked top-down
COMPLETION_COLOR_THRESHOLDS: Sequence[tuple[float, str]] = (
    (100.0, "#4caf50"),
    (75.0, "#8bc34a"),
    (50.0, "#ff9800"),
    (25.0, "#ff5722"),
)
COMPLETION_COLOR_FLOOR = "#f44336"

# =============================================================================
# Table Columns
# =============================================================================
EPIC_ISSUE_COLUMNS: Sequence[str] = (
    "Ticket",
    "summary",
    "status",
    "labels",
    "assignee",
    "issuetype",
)

WCAG_ISSUE_COLUMNS: Sequence[str] = (
    "Ticket",
    "standard",
    "title",
    "status",
)

STANDARD_STATS_COLUMNS: Sequence[str] = (
    "standard",
    "total_items",
    "completed_items",
    "completion_percentage",
)


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"
    top_standards_limit: int = 10


SETTINGS = AppSettings()

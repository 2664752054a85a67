"""Central column metadata and helpers for table rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import streamlit as st

# Mapping of raw column keys to (label, help text, format key)
# format key: "int" -> integer, "percent" -> completion progress bar, None -> text
COLUMN_METADATA: dict[str, tuple[str, str, str | None]] = {
    # Epic issue fields
    "summary": ("Summary", "Issue summary from Jira.", None),
    "status": ("Status", "Current Jira workflow status.", None),
    "labels": ("Labels", "Jira labels associated with the ticket.", None),
    "assignee": ("Assignee", "Current owner responsible for the issue.", None),
    "issuetype": ("Type", "Jira issue type.", None),
    # WCAG export fields
    "standard": ("Standard", "WCAG standard the issue is tracked under.", None),
    "title": ("Title", "Issue title from the accessibility export.", None),
    # Per-standard statistics
    "total_items": ("Total", "Issues tracked under the standard.", "int"),
    "completed_items": ("Completed", "Issues in Done or Cancelled.", "int"),
    "completion_percentage": (
        "Completion",
        "Share of the standard's issues that are Done or Cancelled.",
        "percent",
    ),
}


def apply_column_metadata(
    columns: Iterable[str],
    existing: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a column_config dictionary with human labels and hover help."""

    config: dict[str, Any] = dict(existing or {})
    for col in columns:
        if col in config:
            continue
        meta = COLUMN_METADATA.get(col)
        if not meta:
            continue
        label, help_text, fmt = meta
        if fmt == "int":
            config[col] = st.column_config.NumberColumn(label, help=help_text, format="%d")
        elif fmt == "percent":
            config[col] = st.column_config.ProgressColumn(
                label, help=help_text, format="%.1f%%", min_value=0, max_value=100
            )
        else:
            config[col] = st.column_config.Column(label, help=help_text)
    return config

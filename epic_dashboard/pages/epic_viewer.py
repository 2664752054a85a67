"""Epic Viewer page.

Resolves an Epic key or browse URL and lists every issue linked to it.
"""

from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from epic_dashboard.app import register_page
from epic_dashboard.core.config import SETTINGS
from epic_dashboard.core.errors import DashboardError
from epic_dashboard.core.mappers import issues_to_dataframe
from epic_dashboard.core.service import EpicService
from epic_dashboard.visual.column_metadata import apply_column_metadata
from epic_dashboard.visual.progress import ProgressReporter
from epic_dashboard.visual.tables import prepare_ticket_table

logger = logging.getLogger(__name__)


def _clear_results():
    st.session_state["epic_input"] = ""
    st.session_state["epic_df"] = pd.DataFrame()
    st.session_state["epic_key"] = None
    st.session_state["epic_error"] = ""


@register_page("Epic Viewer")
def epic_viewer_page():
    st.title("Epic Viewer")
    st.caption("Paste an Epic URL (…/browse/ABC-123) or key to list its child issues.")
    service: EpicService | None = st.session_state.get("epic_service")
    if service is None:
        st.warning("Configure the Jira connection on the Setup page first.")
        return

    epic_input = st.text_input("Epic URL or key", key="epic_input")
    fetch_col, clear_col = st.columns([1, 1])
    fetch = fetch_col.button("Fetch Issues", type="primary")
    clear_col.button("Clear", on_click=_clear_results)

    if fetch:
        # Each fetch replaces the previous result set wholesale.
        st.session_state["epic_df"] = pd.DataFrame()
        st.session_state["epic_error"] = ""
        reporter = ProgressReporter("Fetching Epic issues")
        try:
            result = service.fetch_epic_issues(epic_input, progress=reporter.callback)
        except DashboardError as exc:
            logger.info("Epic fetch failed: %s", exc)
            reporter.error("Fetch failed")
            st.session_state["epic_error"] = str(exc)
        else:
            reporter.complete(f"Loaded {len(result.issues)} issue(s) for {result.epic_key}.")
            st.session_state["epic_key"] = result.epic_key
            st.session_state["epic_df"] = issues_to_dataframe(result.issues)
            st.session_state["epic_error"] = result.empty_message or ""

    error = st.session_state.get("epic_error")
    if error:
        st.error(error)

    df: pd.DataFrame = st.session_state.get("epic_df", pd.DataFrame())
    if df.empty:
        return

    epic_key = st.session_state.get("epic_key") or "epic"
    prepared, display_cols, cfg = prepare_ticket_table(df, service.server, "epic_issues")
    st.markdown("---")
    st.caption(f"{len(prepared)} issue(s) linked to {epic_key}. Click a column header to sort.")
    column_config = apply_column_metadata(display_cols, cfg)
    st.dataframe(
        prepared[display_cols].head(SETTINGS.max_table_rows),
        hide_index=True,
        column_config=column_config,
    )
    csv = prepared[display_cols].to_csv(index=False).encode(SETTINGS.download_encoding)
    st.download_button(
        "Download CSV",
        data=csv,
        file_name=f"jira_epic_{epic_key}.csv",
        mime="text/csv",
    )

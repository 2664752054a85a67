"""WCAG Analytics page: completion statistics from the static issue export."""

from __future__ import annotations

import streamlit as st

from epic_dashboard.analytics.wcag import (
    aggregate_standards,
    filter_by_standard,
    load_wcag_issues,
    standards_to_dataframe,
    status_distribution,
    top_standards,
)
from epic_dashboard.app import register_page
from epic_dashboard.core.config import ALL_STANDARDS, JIRA_DEFAULT_SERVER, SETTINGS
from epic_dashboard.core.errors import AnalyticsDataError
from epic_dashboard.core.mappers import wcag_issues_to_dataframe
from epic_dashboard.core.status import completion_color
from epic_dashboard.visual.charts import standards_bar_chart, status_pie_chart
from epic_dashboard.visual.column_metadata import apply_column_metadata
from epic_dashboard.visual.tables import prepare_ticket_table


def _render_overview(summary):
    overall = summary.overall
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Issues", overall.total_issues)
    c2.metric("Completed", overall.completed_issues)
    c3.metric("In Progress", overall.in_progress_issues)
    c4.metric("Overall Completion", f"{overall.overall_completion_percentage:.1f}%")
    color = completion_color(overall.overall_completion_percentage)
    st.markdown(
        f"<div style='height:8px;background:#eee;border-radius:4px'>"
        f"<div style='height:8px;width:{overall.overall_completion_percentage:.1f}%;"
        f"background:{color};border-radius:4px'></div></div>",
        unsafe_allow_html=True,
    )


@register_page("WCAG Analytics")
def analytics_page():
    st.title("WCAG Analytics")
    st.caption("Completion status of accessibility issues, grouped by WCAG standard.")

    try:
        issues = load_wcag_issues()
    except AnalyticsDataError as exc:
        st.error(str(exc))
        return

    summary = aggregate_standards(issues)
    _render_overview(summary)

    st.markdown("---")
    left, right = st.columns(2)
    with left:
        st.subheader("Status Distribution")
        pie = status_pie_chart(status_distribution(issues))
        if pie is None:
            st.info("No issues to chart.")
        else:
            st.altair_chart(pie, use_container_width=True)
    with right:
        st.subheader(f"Top {SETTINGS.top_standards_limit} Standards")
        bar = standards_bar_chart(top_standards(summary))
        if bar is None:
            st.info("No standards to chart.")
        else:
            st.altair_chart(bar, use_container_width=True)

    st.subheader("Standards")
    stats_df = standards_to_dataframe(summary)
    if not stats_df.empty:
        st.dataframe(
            stats_df,
            hide_index=True,
            column_config=apply_column_metadata(stats_df.columns),
        )

    st.subheader("Issues")
    options = [ALL_STANDARDS, *summary.standard_names]
    selected = st.selectbox(
        "Standard",
        options,
        index=0,
        format_func=lambda s: "All standards" if s == ALL_STANDARDS else s,
    )
    filtered = filter_by_standard(issues, selected)
    issues_df = wcag_issues_to_dataframe(filtered)
    if issues_df.empty:
        st.info("No issues for the selected standard.")
        return
    server = st.session_state.get("jira_server") or JIRA_DEFAULT_SERVER
    prepared, display_cols, cfg = prepare_ticket_table(issues_df, server, "wcag_issues")
    st.dataframe(
        prepared[display_cols].head(SETTINGS.max_table_rows),
        hide_index=True,
        column_config=apply_column_metadata(display_cols, cfg),
    )

"""Chart builders (Altair) for the WCAG analytics page."""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import pandas as pd

from epic_dashboard.core.models import StandardStats
from epic_dashboard.core.status import status_color

TOTAL_COLOR = "#2196f3"
COMPLETED_COLOR = "#4caf50"


def status_pie_chart(distribution: dict[str, int]):
    if not distribution:
        return None
    chart_df = pd.DataFrame(
        {
            "status": list(distribution.keys()),
            "count": list(distribution.values()),
        }
    )
    chart_df["share"] = chart_df["count"] / chart_df["count"].sum()
    statuses = chart_df["status"].tolist()
    chart = (
        alt.Chart(chart_df)
        .mark_arc()
        .encode(
            theta=alt.Theta("count:Q"),
            color=alt.Color(
                "status:N",
                title="Status",
                scale=alt.Scale(domain=statuses, range=[status_color(s) for s in statuses]),
                legend=alt.Legend(orient="right"),
            ),
            tooltip=[
                alt.Tooltip("status:N", title="Status"),
                alt.Tooltip("count:Q", title="Issues"),
                alt.Tooltip("share:Q", title="Share", format=".1%"),
            ],
        )
        .properties(height=300)
    )
    return chart


def standards_bar_chart(standards: Sequence[StandardStats]):
    """Grouped bars of total vs completed issues per standard."""
    if not standards:
        return None
    rows = []
    for s in standards:
        rows.append({"standard": s.standard, "series": "Total Issues", "count": s.total_items})
        rows.append({"standard": s.standard, "series": "Completed", "count": s.completed_items})
    chart_df = pd.DataFrame(rows)
    order = [s.standard for s in standards]
    chart = (
        alt.Chart(chart_df)
        .mark_bar()
        .encode(
            x=alt.X("standard:N", title="Standard", sort=order),
            xOffset=alt.XOffset("series:N", sort=["Total Issues", "Completed"]),
            y=alt.Y("count:Q", title="Issues"),
            color=alt.Color(
                "series:N",
                title=None,
                scale=alt.Scale(domain=["Total Issues", "Completed"], range=[TOTAL_COLOR, COMPLETED_COLOR]),
                legend=alt.Legend(orient="top"),
            ),
            tooltip=[
                alt.Tooltip("standard:N", title="Standard"),
                alt.Tooltip("series:N", title="Series"),
                alt.Tooltip("count:Q", title="Issues"),
            ],
        )
        .properties(height=320)
    )
    return chart

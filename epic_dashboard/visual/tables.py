"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from epic_dashboard.core.column_config import get_columns
from epic_dashboard.core.epic_key import issue_url


def add_ticket_link(df: pd.DataFrame, server: str, key_col: str = "key", label: str = "Ticket"):
    if df.empty or key_col not in df.columns:
        return df, {}
    out = df.copy()
    out[label] = out[key_col].astype(str).apply(lambda k: issue_url(server, k) if k and k != "nan" else "")
    cfg = {
        label: st.column_config.LinkColumn(
            label,
            display_text=r"browse/(.*)$",
            help="Open in Jira",
            width="medium",
        )
    }
    return out, cfg


def prepare_ticket_table(
    df: pd.DataFrame,
    server: str,
    column_set: str,
) -> tuple[pd.DataFrame, list[str], dict[str, object]]:
    if df.empty:
        return df, [], {}

    table, cfg = add_ticket_link(df, server)
    canonical = get_columns(column_set) or []
    display_cols: list[str] = [col for col in canonical if col in table.columns]

    if "Ticket" in table.columns and "Ticket" not in display_cols:
        display_cols.insert(0, "Ticket")

    if not display_cols:
        display_cols = [col for col in table.columns if col != "key"]

    return table, display_cols, cfg

"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``epic_dashboard/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from epic_dashboard.app import main

st.set_page_config(layout="wide")
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

PAGES_DIR = Path(__file__).parent / "epic_dashboard" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    import_module(f"epic_dashboard.pages.{py.stem}")


def _auto_init_epic_service():
    """Initialize the Jira connection from Streamlit secrets if available."""
    if "epic_service" in st.session_state:
        return
    from epic_dashboard.pages.setup import secret_credentials, store_credentials

    credentials = secret_credentials()
    if credentials is None:
        st.sidebar.caption("Jira secrets not found. Use the Setup page to connect.")
        return
    store_credentials(credentials)
    st.sidebar.caption(f"Jira: {credentials.server}")


_auto_init_epic_service()

if __name__ == "__main__":
    main()

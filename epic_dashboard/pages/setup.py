"""Connection setup page: collect the Jira server and Personal Access Token."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

import streamlit as st

from epic_dashboard.app import register_page
from epic_dashboard.core.config import JIRA_DEFAULT_SERVER
from epic_dashboard.core.errors import DashboardError
from epic_dashboard.core.models import JiraCredentials
from epic_dashboard.core.service import EpicService

FALSE_FLAG_VALUES = frozenset({"false", "0", "no", "off"})


def parse_verify_flag(value: Any) -> bool:
    """Interpret a TLS verification secret; TOML strings like "false" disable it."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_FLAG_VALUES
    return bool(value)


def secret_credentials() -> JiraCredentials | None:
    """Build credentials from Streamlit secrets, if a server is configured there."""
    try:
        jira_secrets = st.secrets.get("jira", {})
    except FileNotFoundError:
        # No secrets.toml configured
        return None
    server = jira_secrets.get("JIRA_SERVER") or st.secrets.get("JIRA_SERVER")
    token = (
        jira_secrets.get("JIRA_API_TOKEN")
        or st.secrets.get("JIRA_API_TOKEN")
        or jira_secrets.get("JIRA_TOKEN")
        or st.secrets.get("JIRA_TOKEN")
    )
    verify = jira_secrets.get("JIRA_VERIFY_TLS", st.secrets.get("JIRA_VERIFY_TLS", True))
    if not server:
        return None
    return JiraCredentials(server=server, token=token or None, verify_tls=parse_verify_flag(verify))


def validate_connection_form(credentials: JiraCredentials, *, test: bool) -> str | None:
    """Return the form error, if any. Runs before anything is stored."""
    if not credentials.server:
        return "Jira Server URL is required."
    if test and not credentials.token:
        return "Please enter a Personal Access Token first"
    return None


def store_credentials(
    credentials: JiraCredentials,
    state: MutableMapping[str, Any] | None = None,
) -> EpicService:
    if state is None:
        state = st.session_state
    service = EpicService.from_credentials(credentials)
    state["jira_credentials"] = credentials
    state["jira_server"] = credentials.server
    state["epic_service"] = service
    return service


@register_page("Setup / Connection")
def setup_page():
    st.title("Jira Connection Setup")
    st.caption("Enter a Personal Access Token (use secrets.toml for a persistent setup).")

    current: JiraCredentials | None = st.session_state.get("jira_credentials") or secret_credentials()

    server = st.text_input(
        "Jira Server URL",
        value=(current.server if current else JIRA_DEFAULT_SERVER),
    )
    token = st.text_input(
        "Personal Access Token",
        type="password",
        value=(current.token or "") if current else "",
    )
    verify_tls = st.checkbox(
        "Verify TLS certificates",
        value=current.verify_tls if current else True,
        help="Disable only for development servers with self-signed certificates.",
    )
    save_col, test_col = st.columns(2)
    save_btn = save_col.button("Save Connection", type="primary")
    test_btn = test_col.button("Test Connection")

    if save_btn or test_btn:
        credentials = JiraCredentials(server=server.strip(), token=token.strip() or None, verify_tls=verify_tls)
        error = validate_connection_form(credentials, test=test_btn)
        if error:
            st.error(error)
            return
        service = store_credentials(credentials)
        if save_btn:
            st.success("Connection settings saved.")
        if test_btn:
            with st.spinner("Contacting Jira..."):
                try:
                    user = service.test_connection()
                except DashboardError as exc:
                    st.error(str(exc))
                    return
            st.success(
                f"Connection successful! Logged in as: {user.display_name or '(unknown)'}"
                f" | Email: {user.email_address or '(hidden)'}"
            )

    if "epic_service" in st.session_state:
        st.info(f"Connected to {st.session_state['jira_server']}.")

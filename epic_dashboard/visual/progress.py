"""Progress reporting for Jira fetches, rendered as a Streamlit status block."""

from __future__ import annotations

import streamlit as st


class ProgressReporter:
    """Collects service progress messages into a collapsible status container."""

    def __init__(self, title: str):
        self._status = st.status(title, expanded=False)
        self._progress = None
        self._finalized = False

    def callback(self, message: str, current: int | None = None, total: int | None = None) -> None:
        """Signature compatible with EpicService progress callbacks."""
        if self._finalized:
            return
        self._status.write(message)
        if total:
            ratio = min(max((current or 0) / total, 0.0), 1.0)
            if self._progress is None:
                self._progress = self._status.progress(ratio)
            else:
                self._progress.progress(ratio)

    def complete(self, message: str) -> None:
        if self._finalized:
            return
        self._status.update(label=message, state="complete")
        self._finalized = True

    def error(self, message: str) -> None:
        if self._finalized:
            return
        self._status.update(label=message, state="error", expanded=True)
        self._finalized = True

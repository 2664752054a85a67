"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

PAGES = {}

PREFERRED_ORDER = [
    "WCAG Analytics",  # landing page
    "Epic Viewer",
    "Setup / Connection",
]


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def ordered_pages() -> list[str]:
    ordered = [name for name in PREFERRED_ORDER if name in PAGES]
    trailing = sorted(name for name in PAGES if name not in PREFERRED_ORDER)
    return ordered + trailing


def main():
    st.sidebar.title("Epic & WCAG Dashboard")
    pages = ordered_pages()
    if not pages:
        st.write("No pages registered yet.")
        return
    page = st.sidebar.selectbox("Page", pages, index=0)
    PAGES[page]()


if __name__ == "__main__":
    main()

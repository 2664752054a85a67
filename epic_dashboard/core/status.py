"""Status categorization utilities.

Raw workflow statuses are treated as opaque strings; the only interpretation
applied to them is a lookup in ``STATUS_CATEGORIES`` from config.py.
"""

from __future__ import annotations

from .config import (
    COMPLETION_COLOR_FLOOR,
    COMPLETION_COLOR_THRESHOLDS,
    DEFAULT_STATUS_COLOR,
    STATUS_CATEGORIES,
    STATUS_CATEGORY_COMPLETED,
    STATUS_CATEGORY_IN_PROGRESS,
    STATUS_CATEGORY_OTHER,
    STATUS_COLORS,
)


def status_category(value: str | None) -> str:
    """Return the category for a raw status, or ``"other"`` if unmapped.

    Examples
    --------
    >>> status_category("Cancelled")
    'completed'
    >>> status_category("Accepted Remedied")
    'other'
    """
    if not value:
        return STATUS_CATEGORY_OTHER
    return STATUS_CATEGORIES.get(value, STATUS_CATEGORY_OTHER)


def is_completed(value: str | None) -> bool:
    return status_category(value) == STATUS_CATEGORY_COMPLETED


def is_in_progress(value: str | None) -> bool:
    return status_category(value) == STATUS_CATEGORY_IN_PROGRESS


def status_color(value: str | None) -> str:
    if not value:
        return DEFAULT_STATUS_COLOR
    return STATUS_COLORS.get(value, DEFAULT_STATUS_COLOR)


def completion_color(percentage: float) -> str:
    """Traffic-light color for a completion percentage (0-100)."""
    for threshold, color in COMPLETION_COLOR_THRESHOLDS:
        if percentage >= threshold:
            return color
    return COMPLETION_COLOR_FLOOR


def completion_percentage(completed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return completed / total * 100

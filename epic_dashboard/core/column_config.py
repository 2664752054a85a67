"""Load and expose column configuration from YAML (with fallbacks)."""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import EPIC_ISSUE_COLUMNS, STANDARD_STATS_COLUMNS, WCAG_ISSUE_COLUMNS

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "epic_issues": list(EPIC_ISSUE_COLUMNS),
        "wcag_issues": list(WCAG_ISSUE_COLUMNS),
        "standards": list(STANDARD_STATS_COLUMNS),
    }


def load_column_sets(base_path: str | Path | None = None, *, reload: bool = False):
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    defaults = _defaults()
    if not yaml_path.exists():
        _CACHE = defaults
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except yaml.YAMLError:
        _CACHE = defaults
        return _CACHE
    sets = data.get("sets", {}) if isinstance(data, dict) else {}
    _CACHE = {name: list(sets.get(name) or fallback) for name, fallback in defaults.items()}
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])

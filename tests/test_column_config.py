from epic_dashboard.core.column_config import get_columns, load_column_sets


def test_column_sets_load():
    sets = load_column_sets()
    assert {"epic_issues", "wcag_issues", "standards"} <= set(sets)
    assert get_columns("epic_issues")[0] == "Ticket"
    assert get_columns("unknown") == []


def test_column_sets_yaml_override(tmp_path):
    (tmp_path / "columns.yaml").write_text("sets:\n  epic_issues: [Ticket, status]\n")
    sets = load_column_sets(tmp_path, reload=True)
    assert sets["epic_issues"] == ["Ticket", "status"]
    assert "standard" in sets["wcag_issues"]
    load_column_sets(reload=True)


def test_column_sets_fallback_without_yaml(tmp_path):
    sets = load_column_sets(tmp_path, reload=True)
    assert "summary" in sets["epic_issues"]
    load_column_sets(reload=True)

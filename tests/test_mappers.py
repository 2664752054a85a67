from epic_dashboard.core.mappers import (
    issues_to_dataframe,
    map_issue,
    parse_wcag_issues,
    transform_issues,
)


def _raw(key, assignee=None, labels=None):
    fields = {
        "summary": f"Summary {key}",
        "status": {"name": "In Progress"},
        "issuetype": {"name": "Story"},
        "assignee": {"displayName": assignee} if assignee else None,
    }
    if labels is not None:
        fields["labels"] = labels
    return {"key": key, "fields": fields}


def test_map_issue_full_record():
    view = map_issue(_raw("ABC-1", assignee="Alice", labels=["a11y", "ui"]))
    assert view.key == "ABC-1"
    assert view.summary == "Summary ABC-1"
    assert view.status == "In Progress"
    assert view.issuetype == "Story"
    assert view.labels == ("a11y", "ui")
    assert view.assignee == "Alice"


def test_missing_assignee_and_labels_default():
    view = map_issue(_raw("ABC-2"))
    assert view.assignee == "Unassigned"
    assert view.labels == ()


def test_malformed_nested_fields_treated_as_absent():
    view = map_issue({"key": "ABC-3", "fields": {"status": "Done", "assignee": "bob", "labels": "x"}})
    assert view.status == ""
    assert view.assignee == "Unassigned"
    assert view.labels == ()
    assert map_issue({"key": "ABC-4"}).summary == ""


def test_transform_preserves_order_and_is_idempotent():
    raw = [_raw("ABC-3"), _raw("ABC-1", assignee="Alice"), _raw("ABC-2")]
    once = transform_issues(raw)
    twice = transform_issues(raw)
    assert [i.key for i in once] == ["ABC-3", "ABC-1", "ABC-2"]
    assert once == twice
    assert transform_issues(None) == []


def test_issues_to_dataframe_joins_labels():
    df = issues_to_dataframe(transform_issues([_raw("ABC-1", labels=["b", "a"])]))
    assert list(df.columns) == ["key", "summary", "status", "labels", "assignee", "issuetype"]
    assert df.loc[0, "labels"] == "b, a"
    assert issues_to_dataframe([]).empty


def test_parse_wcag_issues_skips_non_dicts():
    issues = parse_wcag_issues(
        [
            {"issue_number": "W-1", "standard": "1.1.1", "title": "Alt text", "status": "Done"},
            "garbage",
            {"issue_number": "W-2", "standard": "2.1.1"},
        ]
    )
    assert len(issues) == 2
    assert issues[1].status == ""

import pytest

from epic_dashboard.core.epic_key import build_epic_jql, extract_epic_key, issue_url
from epic_dashboard.core.errors import InvalidFormatError


@pytest.mark.parametrize("key", ["ABC-1", "CXCDC-30694", "A-0"])
def test_plain_key_returned_unchanged(key):
    assert extract_epic_key(key) == key


def test_key_is_trimmed():
    assert extract_epic_key("  ABC-12 \n") == "ABC-12"


def test_browse_url_extracts_key():
    assert extract_epic_key("https://jira.tools.sap/browse/ABC-123") == "ABC-123"
    assert extract_epic_key("https://jira.tools.sap/browse/ABC-123?focusedId=9") == "ABC-123"


@pytest.mark.parametrize(
    "value",
    [
        "abc-123",
        "ABC123",
        "https://jira.tools.sap/projects/ABC",
        "ABC-12x",
        "ABC-\u0661\u0662\u0663",
        "https://jira.tools.sap/browse/ABC-\u0661\u0662\u0663",
    ],
)
def test_invalid_input_raises(value):
    with pytest.raises(InvalidFormatError, match="Invalid Epic URL or key format"):
        extract_epic_key(value)


def test_empty_input_raises():
    with pytest.raises(InvalidFormatError):
        extract_epic_key("   ")
    with pytest.raises(InvalidFormatError):
        extract_epic_key(None)


def test_epic_jql_covers_parent_and_epic_link():
    assert build_epic_jql("ABC-1") == 'parent = ABC-1 OR "Epic Link" = ABC-1'


def test_issue_url_strips_trailing_slash():
    assert issue_url("https://jira.example/", "ABC-1") == "https://jira.example/browse/ABC-1"

"""Tests for include/exclude pattern matching."""

import re

import pytest
from hypothesis import given, strategies as st

from keepalive.matching import is_cacheable, matches


@pytest.mark.unit
@pytest.mark.parametrize(
    "pattern, name, expected",
    [
        (["a", "b"], "a", True),
        (["a", "b"], "c", False),
        (("a", "b"), "b", True),
        ("a,b", "b", True),
        ("a,b", "c", False),
        ("a", "a", True),
        (re.compile(r"^x"), "xyz", True),
        (re.compile(r"^x"), "yz", False),
        (re.compile(r"y"), "xyz", True),
    ],
)
def test_matches_table(pattern, name, expected):
    """Test list, delimited string and regex patterns."""
    assert matches(pattern, name) is expected


@pytest.mark.unit
def test_delimited_string_is_not_trimmed():
    """Parts keep their surrounding whitespace."""
    assert matches("a, b", "b") is False
    assert matches("a, b", " b") is True


@pytest.mark.unit
def test_string_pattern_requires_whole_part():
    """A substring of a part is not a match."""
    assert matches("header,footer", "head") is False


@pytest.mark.unit
@pytest.mark.parametrize("pattern", [None, 42, {"a": 1}, {"a"}, object()])
def test_unsupported_pattern_never_matches(pattern):
    """Unsupported shapes degrade to no match without raising."""
    assert matches(pattern, "a") is False


@given(st.lists(st.text(max_size=8), max_size=10), st.text(max_size=8))
def test_list_pattern_is_membership(names, name):
    """Property test: list patterns match exactly their members."""
    assert matches(names, name) == (name in names)


@pytest.mark.unit
def test_is_cacheable_without_filters():
    assert is_cacheable("A") is True
    assert is_cacheable(None) is True


@pytest.mark.unit
def test_is_cacheable_include():
    """Include rejects non-members and unnamed components."""
    assert is_cacheable("A", include=["A"]) is True
    assert is_cacheable("B", include=["A"]) is False
    assert is_cacheable(None, include=["A"]) is False


@pytest.mark.unit
def test_is_cacheable_exclude():
    """Exclude rejects members only; unnamed components pass."""
    assert is_cacheable("A", exclude="A,B") is False
    assert is_cacheable("C", exclude="A,B") is True
    assert is_cacheable(None, exclude="A,B") is True


@pytest.mark.unit
def test_is_cacheable_exclude_wins_over_include():
    assert is_cacheable("A", include=["A"], exclude=re.compile("A")) is False


@pytest.mark.unit
def test_is_cacheable_empty_include_rejects_everything():
    """An empty include list is still a filter."""
    assert is_cacheable("A", include=[]) is False


@pytest.mark.unit
def test_is_cacheable_empty_string_disables_filters():
    """An empty delimited string means no filter at all."""
    assert is_cacheable("A", include="") is True
    assert is_cacheable(None, include="") is True
    assert is_cacheable("A", exclude="") is True

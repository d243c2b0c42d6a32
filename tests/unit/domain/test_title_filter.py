"""Unit tests for the title filter."""

import pytest

from tuneup.domain.errors import InvalidTitlePatternError
from tuneup.domain.title_filter import TitleFilter


def test_no_patterns_allows_everything():
    """A filter built from None is inactive and allows any title."""
    title_filter = TitleFilter.from_patterns(None)
    assert not title_filter.active
    assert title_filter.allows("Anything at all")


def test_empty_patterns_allow_everything():
    """An empty pattern list behaves like no filter."""
    title_filter = TitleFilter.from_patterns([])
    assert not title_filter.active
    assert title_filter.allows("Sign-In")


@pytest.mark.parametrize(
    "title, allowed",
    [
        ("Sign-In", True),
        ("Sign-Out", True),
        ("Sign-", True),
        ("Other", False),
        ("My Sign-In", False),
        ("Sign", False),
    ],
)
def test_patterns_must_match_whole_title(title, allowed):
    """Patterns are anchored at both ends."""
    assert TitleFilter.from_patterns(["Sign-.*"]).allows(title) is allowed


def test_any_pattern_may_match():
    """A title runs if any pattern matches, whatever its position."""
    title_filter = TitleFilter.from_patterns(["Login", "Sign-.*", "Logout"])
    assert title_filter.active
    assert title_filter.allows("Sign-In")
    assert title_filter.allows("Logout")
    assert not title_filter.allows("Settings")


def test_alternation_is_anchored_as_a_whole():
    """Alternation inside a pattern cannot escape the anchors."""
    title_filter = TitleFilter.from_patterns(["a|b"])
    assert title_filter.allows("a")
    assert title_filter.allows("b")
    assert not title_filter.allows("ab")


def test_invalid_pattern_raises():
    """Broken regular expressions are rejected eagerly."""
    with pytest.raises(InvalidTitlePatternError, match="Sign-\\("):
        TitleFilter.from_patterns(["Sign-("])

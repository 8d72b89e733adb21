import pytest

from chnative.word_matcher import WordMatcher


def _contains(haystack: str, needle: str) -> bool:
    matcher = WordMatcher(needle)
    return any(matcher.match(char) for char in haystack)


@pytest.mark.parametrize(
    "haystack, needle, expected",
    [
        ("select * from test", "select", True),
        ("select * from test", "*", True),
        ("select * from test", "elect", True),
        ("select * from test", "zelect", False),
        ("select * from test", "sElEct", True),
    ],
)
def test_word_matcher_table(haystack, needle, expected):
    assert _contains(haystack, needle) is expected


def test_match_reports_on_last_character_only():
    matcher = WordMatcher("and")
    assert [matcher.match(c) for c in "AnD"] == [False, False, True]


def test_matcher_resets_after_full_match():
    matcher = WordMatcher("ab")
    results = [matcher.match(c) for c in "abab"]
    assert results == [False, True, False, True]


def test_mismatch_does_not_reconsider_breaking_character():
    assert _contains("sselect", "select") is False


def test_empty_needle_rejected():
    with pytest.raises(ValueError):
        WordMatcher("")
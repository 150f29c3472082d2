# tests/test_content_filter.py
"""Tests for dirty-word screening of wheel entries."""

import pytest

from wheel_spinner.services.content_filter import (
    ContentFilter,
    DirtyWordList,
    is_blocked,
    tokenize,
)

FOO = DirtyWordList.from_iterable(["foo"])


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("foobar", False),
        ("foo bar", True),
        ("Foo.", True),
        ("FOO", True),
        ("food for thought", False),
        ("(foo)", True),
        ("a-foo-b", True),
        ("x=foo#y", True),
        ('say "foo"', True),
        ("foo\tbar", True),
    ],
)
def test_token_exact_case_insensitive(text: str, expected: bool) -> None:
    assert is_blocked([{"text": text}], FOO) is expected


def test_nbsp_marker_is_a_space() -> None:
    words = DirtyWordList.from_iterable(["bar"])
    assert is_blocked([{"text": "foo&nbsp;bar"}], words) is True
    assert is_blocked([{"text": "foo&NBSP;bar"}], words) is True


def test_any_blocked_entry_blocks_all() -> None:
    entries = [{"text": "pizza"}, {"text": "tacos"}, {"text": "foo!"}]
    assert is_blocked(entries, FOO) is True


def test_entries_without_text_are_skipped() -> None:
    entries = [{}, {"text": ""}, {"text": None}, {"image": "foo.png"}, "foo", {"text": "ok"}]
    assert is_blocked(entries, FOO) is False


def test_empty_list_blocks_nothing() -> None:
    assert is_blocked([{"text": "foo"}], DirtyWordList()) is False
    assert is_blocked(None, FOO) is False


def test_tokenize_splits_on_word_breaks() -> None:
    assert tokenize("Hello,World:one;two!three/four?five+six[seven]eight_nine") == [
        "hello", "world", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    ]


def test_dirty_word_list_normalizes_words() -> None:
    words = DirtyWordList.from_iterable(["Zed", "apple", "APPLE", " ", ""])
    assert words.as_list() == ["apple", "zed"]
    assert "apple" in words
    assert "Apple" not in words


def test_content_filter_reads_config_entries() -> None:
    content_filter = ContentFilter(DirtyWordList.from_iterable(["banned"]))
    assert content_filter.is_config_blocked({"entries": [{"text": "banned word"}]}) is True
    assert content_filter.is_config_blocked({"entries": [{"text": "spin me"}]}) is False
    assert content_filter.is_config_blocked({"title": "no entries"}) is False
    assert content_filter.is_config_blocked({"entries": None}) is False


def test_entries_that_are_not_a_list_are_refused() -> None:
    content_filter = ContentFilter(DirtyWordList.from_iterable(["banned"]))
    assert content_filter.is_config_blocked({"entries": "banned"}) is True
    assert content_filter.is_config_blocked({"entries": {"0": {"text": "banned"}}}) is True
    assert ContentFilter(DirtyWordList()).is_config_blocked({"entries": {"0": {}}}) is True

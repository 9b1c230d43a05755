from __future__ import annotations

import pytest

from lexibot.utils import count_words, normalise_text, reverse_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  Hello World\t\r\n", "hello world"),
        ("What's  UP?", "what's  up?"),
        ("ÇAY Über", "Çay Über"),
        ("   \t\n", ""),
        ("", ""),
    ],
)
def test_normalise_text(raw: str, expected: str) -> None:
    assert normalise_text(raw) == expected


@pytest.mark.parametrize("raw", ["  MiXeD Case  ", "\tReverse ABC\n", "ÉCOLE", "a  b"])
def test_normalise_text_is_idempotent(raw: str) -> None:
    once = normalise_text(raw)
    assert normalise_text(once) == once


def test_reverse_text() -> None:
    assert reverse_text("abc") == "cba"
    assert reverse_text("héllo") == "olléh"


def test_count_words_ignores_irregular_spacing() -> None:
    assert count_words("one two three") == 3
    assert count_words("  a   b  ") == 2
    assert count_words("   ") == 0

"""Text helpers shared by the router, resolver and calculator."""

from __future__ import annotations

import re
from typing import List

_TRIM_CHARS = " \t\r\n"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)
_WORD_SPLIT_RE = re.compile(r"\s+")


def normalise_text(value: str) -> str:
    """Trim surrounding whitespace and lowercase ASCII letters.

    Internal whitespace, punctuation and non-ASCII characters are left
    untouched, which keeps the operation idempotent.
    """
    return value.strip(_TRIM_CHARS).translate(_ASCII_LOWER)


def reverse_text(value: str) -> str:
    """Return ``value`` with its characters in reverse order."""
    return value[::-1]


def split_words(value: str) -> List[str]:
    """Split on runs of whitespace, dropping empty tokens."""
    return [token for token in _WORD_SPLIT_RE.split(value) if token]


def count_words(value: str) -> int:
    return len(split_words(value))

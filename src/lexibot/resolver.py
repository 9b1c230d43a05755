"""Response resolution for free-form (non-command) input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .lexicon import Lexicon
from .logging import get_logger

LOGGER = get_logger(__name__)

FALLBACK_LINES = (
    "Hmm, I don't quite understand that. 🤔",
    "Try 'help' to see what I can do, or just say hi!",
)
FALLBACK_RESPONSE = "\n".join(FALLBACK_LINES)


class MatchKind(str, Enum):
    ALIAS = "alias"
    EXACT = "exact"
    SUBSTRING = "substring"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Resolution:
    response: str
    kind: MatchKind
    key: Optional[str] = None


class ResponseResolver:
    """Resolve input through aliases, exact phrases and substring matching.

    Substring candidates are scanned longest first, ties broken lexically, so
    the chosen response is stable for a given lexicon.
    """

    def __init__(self, lexicon: Lexicon, min_substring_length: int = 3) -> None:
        self.lexicon = lexicon
        self.min_substring_length = min_substring_length
        self._substring_keys: Tuple[str, ...] = tuple(
            sorted(
                (key for key in lexicon.responses if len(key) >= min_substring_length),
                key=lambda key: (-len(key), key),
            )
        )

    def resolve(self, text: str) -> str:
        return self.explain(text).response

    def explain(self, text: str) -> Resolution:
        resolution = self._match(text)
        LOGGER.debug("Resolved %r via %s (%s)", text, resolution.kind.value, resolution.key)
        return resolution

    def _match(self, text: str) -> Resolution:
        target = self.lexicon.resolve_alias(text)
        if target is not None:
            response = self.lexicon.lookup(target)
            if response is not None:
                return Resolution(response, MatchKind.ALIAS, target)

        response = self.lexicon.lookup(text)
        if response is not None:
            return Resolution(response, MatchKind.EXACT, text)

        for key in self._substring_keys:
            if key in text:
                return Resolution(self.lexicon.responses[key], MatchKind.SUBSTRING, key)

        return Resolution(FALLBACK_RESPONSE, MatchKind.FALLBACK)


__all__ = ["FALLBACK_RESPONSE", "MatchKind", "Resolution", "ResponseResolver"]

"""Immutable phrase lexicon: canned responses, aliases, jokes and facts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple

from .data import load_default_lexicon_data
from .logging import get_logger
from .utils import choose, load_yaml_or_json, normalise_text
from .utils.random import IntegerSource

LOGGER = get_logger(__name__)


class LexiconError(ValueError):
    """Raised when lexicon data breaks one of its invariants."""


class InternalError(RuntimeError):
    """Raised when the bot is asked for content it does not have."""


@dataclass(frozen=True)
class Lexicon:
    """Read-only view over the bot's fixed phrase data.

    ``responses`` maps canonical phrases to response text, ``aliases`` maps
    alternative phrasings to a canonical phrase. Every alias target must be a
    canonical key and no alias may shadow a canonical key.
    """

    responses: Mapping[str, str] = field(default_factory=dict)
    aliases: Mapping[str, str] = field(default_factory=dict)
    jokes: Tuple[str, ...] = ()
    facts: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "responses", MappingProxyType(dict(self.responses)))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
        object.__setattr__(self, "jokes", tuple(self.jokes))
        object.__setattr__(self, "facts", tuple(self.facts))
        self.validate()

    def validate(self) -> None:
        for key, response in self.responses.items():
            if not key:
                raise LexiconError("Canonical phrases must not be empty")
            if not response:
                raise LexiconError(f"Response for {key!r} is empty")
        for alias, target in self.aliases.items():
            if alias in self.responses:
                raise LexiconError(f"Alias {alias!r} shadows a canonical phrase")
            if target not in self.responses:
                raise LexiconError(f"Alias {alias!r} points at unknown phrase {target!r}")

    # Queries ---------------------------------------------------------------------
    def lookup(self, key: str) -> Optional[str]:
        return self.responses.get(key)

    def resolve_alias(self, key: str) -> Optional[str]:
        return self.aliases.get(key)

    def random_joke(self, rng: IntegerSource) -> str:
        if not self.jokes:
            raise InternalError("Lexicon has no jokes")
        return choose(rng, self.jokes)

    def random_fact(self, rng: IntegerSource) -> str:
        if not self.facts:
            raise InternalError("Lexicon has no facts")
        return choose(rng, self.facts)

    def counts(self) -> Dict[str, int]:
        return {
            "responses": len(self.responses),
            "aliases": len(self.aliases),
            "jokes": len(self.jokes),
            "facts": len(self.facts),
        }

    # Construction ----------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Lexicon:
        return LexiconBuilder().update(data).build()

    @classmethod
    def default(cls) -> Lexicon:
        return cls.from_dict(load_default_lexicon_data())


class LexiconBuilder:
    """Accumulates lexicon layers before freezing them into a :class:`Lexicon`."""

    def __init__(self) -> None:
        self.responses: Dict[str, str] = {}
        self.aliases: Dict[str, str] = {}
        self.jokes: List[str] = []
        self.facts: List[str] = []

    def update(self, data: Mapping[str, Any]) -> LexiconBuilder:
        unknown = set(data) - {"responses", "aliases", "jokes", "facts"}
        if unknown:
            raise LexiconError(f"Unknown lexicon sections: {', '.join(sorted(unknown))}")
        for key, response in _mapping(data, "responses").items():
            self.responses[normalise_text(str(key))] = str(response)
        for alias, target in _mapping(data, "aliases").items():
            self.aliases[normalise_text(str(alias))] = normalise_text(str(target))
        _extend_unique(self.jokes, _sequence(data, "jokes"))
        _extend_unique(self.facts, _sequence(data, "facts"))
        return self

    def build(self) -> Lexicon:
        lexicon = Lexicon(
            responses=self.responses,
            aliases=self.aliases,
            jokes=tuple(self.jokes),
            facts=tuple(self.facts),
        )
        LOGGER.debug("Built lexicon %s", lexicon.counts())
        return lexicon


def _mapping(data: Mapping[str, Any], section: str) -> Mapping[Any, Any]:
    value = data.get(section) or {}
    if not isinstance(value, Mapping):
        raise LexiconError(f"Lexicon section {section!r} must be a mapping")
    return value


def _sequence(data: Mapping[str, Any], section: str) -> List[str]:
    value = data.get(section) or []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise LexiconError(f"Lexicon section {section!r} must be a list")
    return [str(item) for item in value]


def _extend_unique(target: List[str], items: Iterable[str]) -> None:
    for item in items:
        if item and item not in target:
            target.append(item)


def load_lexicon(path: Optional[Path] = None, *, include_defaults: bool = True) -> Lexicon:
    """Build the lexicon from the bundled defaults and an optional extra file."""

    builder = LexiconBuilder()
    if include_defaults:
        builder.update(load_default_lexicon_data())
    if path is not None:
        LOGGER.info("Loading lexicon overlay from %s", path)
        builder.update(load_yaml_or_json(Path(path)))
    return builder.build()


__all__ = ["InternalError", "Lexicon", "LexiconBuilder", "LexiconError", "load_lexicon"]

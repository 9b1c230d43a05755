"""Configuration helpers for lexibot."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

from .utils.io import load_yaml_or_json


@dataclass
class SessionConfig:
    """Configuration for the chat session."""

    history_window: int = 20
    min_substring_length: int = 3
    seed: Optional[int] = None
    welcome: bool = True

    def __post_init__(self) -> None:
        if self.history_window <= 0:
            raise ValueError("history_window must be positive")
        if self.min_substring_length <= 0:
            raise ValueError("min_substring_length must be positive")


@dataclass
class LexiconConfig:
    """Where the phrase lexicon comes from."""

    path: Optional[Path] = None
    include_defaults: bool = True

    def __post_init__(self) -> None:
        if self.path is not None:
            self.path = Path(self.path)


@dataclass
class PresenterConfig:
    """Configuration for terminal output."""

    color: bool = True
    banner: bool = True


@dataclass
class BotConfig:
    """Top-level configuration for the chat bot."""

    session: SessionConfig = field(default_factory=SessionConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    presenter: PresenterConfig = field(default_factory=PresenterConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BotConfig:
        return cls(
            session=SessionConfig(**data.get("session", {})),
            lexicon=LexiconConfig(**data.get("lexicon", {})),
            presenter=PresenterConfig(**data.get("presenter", {})),
            log_level=str(data.get("log_level", "WARNING")),
        )

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        if self.lexicon.path is not None:
            payload["lexicon"]["path"] = str(self.lexicon.path)
        return payload


def _merge_dict(base: dict[str, Any], overrides: Iterable[dict[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for override in overrides:
        for key, value in override.items():
            existing = result.get(key)
            if isinstance(value, dict) and isinstance(existing, dict):
                nested = _merge_dict(cast(dict[str, Any], existing), [value])
                result[key] = nested
            else:
                result[key] = value
    return result


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[Iterable[dict[str, Any]]] = None,
) -> BotConfig:
    """Load configuration from disk and merge overrides."""

    overrides = list(overrides or [])
    if path is None:
        base: dict[str, Any] = {}
    else:
        base = load_yaml_or_json(Path(path))

    merged = _merge_dict(base, overrides)
    return BotConfig.from_dict(merged)

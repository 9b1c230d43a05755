from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from lexibot.engine import ChatEngine
from lexibot.lexicon import Lexicon
from lexibot.presenter import Presenter
from lexibot.session import Session, SessionClock


class FixedRng:
    """Stand-in for ``numpy.random.Generator`` that replays chosen integers."""

    def __init__(self, *values: int) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        value = self.values.pop(0) if self.values else low
        assert low <= value < high
        return value


class FakeTimer:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def script(*lines: str) -> Callable[[str], Optional[str]]:
    """Build a line reader that returns ``lines`` and then end of input."""
    iterator: Iterator[str] = iter(lines)

    def reader(prompt: str) -> Optional[str]:
        return next(iterator, None)

    return reader


@pytest.fixture(scope="session")
def lexicon() -> Lexicon:
    return Lexicon.default()


@pytest.fixture
def rng() -> FixedRng:
    return FixedRng()


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def output() -> list[str]:
    return []


@pytest.fixture
def engine(lexicon: Lexicon, rng: FixedRng, timer: FakeTimer, output: list[str]) -> ChatEngine:
    return ChatEngine(
        lexicon,
        Presenter(echo=output.append),
        rng,
        session=Session(clock=SessionClock(timer)),
        now=lambda: datetime(2024, 3, 5, 14, 7, 9),
    )

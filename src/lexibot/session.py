"""Per-process session bookkeeping: history, clock and the running flag."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

Timer = Callable[[], float]


def format_duration(seconds: float) -> str:
    """Render a duration as ``<H>h <M>m <S>s``."""
    total = max(int(seconds), 0)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours}h {minutes}m {secs}s"


class SessionClock:
    """Start timestamp captured once; uptime is recomputed on every read."""

    def __init__(self, timer: Timer = time.monotonic) -> None:
        self._timer = timer
        self.started_at = timer()

    def elapsed(self) -> float:
        return self._timer() - self.started_at


@dataclass(frozen=True)
class HistoryView:
    """The tail of the history log prepared for display.

    ``entries`` holds ``(position, text)`` pairs numbered from 1 over the whole
    session, oldest first.
    """

    entries: Tuple[Tuple[int, str], ...]
    total: int

    @property
    def shown(self) -> int:
        return len(self.entries)


@dataclass
class Session:
    clock: SessionClock = field(default_factory=SessionClock)
    history: List[str] = field(default_factory=list)
    running: bool = True

    def record(self, text: str) -> None:
        self.history.append(text)

    @property
    def message_count(self) -> int:
        return len(self.history)

    def uptime(self) -> str:
        return format_duration(self.clock.elapsed())

    def recent(self, window: int = 20) -> HistoryView:
        start = max(len(self.history) - window, 0)
        entries = tuple(
            (position, text)
            for position, text in enumerate(self.history[start:], start=start + 1)
        )
        return HistoryView(entries=entries, total=len(self.history))

    def stop(self) -> None:
        self.running = False

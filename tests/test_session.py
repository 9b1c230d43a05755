from __future__ import annotations

from conftest import FakeTimer
from lexibot.session import Session, SessionClock, format_duration


def test_format_duration() -> None:
    assert format_duration(0) == "0h 0m 0s"
    assert format_duration(59.9) == "0h 0m 59s"
    assert format_duration(3661) == "1h 1m 1s"
    assert format_duration(90061) == "25h 1m 1s"


def test_uptime_is_recomputed_from_start(timer: FakeTimer) -> None:
    session = Session(clock=SessionClock(timer))
    assert session.uptime() == "0h 0m 0s"
    timer.advance(3661)
    assert session.uptime() == "1h 1m 1s"


def test_recent_history_window() -> None:
    session = Session()
    for index in range(1, 26):
        session.record(f"message {index}")
    view = session.recent(20)
    assert view.total == 25
    assert view.shown == 20
    assert view.entries[0] == (6, "message 6")
    assert view.entries[-1] == (25, "message 25")


def test_recent_history_shorter_than_window() -> None:
    session = Session()
    for text in ("a", "b", "c"):
        session.record(text)
    assert session.recent(20).entries == ((1, "a"), (2, "b"), (3, "c"))


def test_stop_clears_running_flag() -> None:
    session = Session()
    assert session.running
    session.stop()
    assert not session.running

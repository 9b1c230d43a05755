from __future__ import annotations

import pytest

from lexibot.router import Command, CommandKind, route


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("bye", CommandKind.EXIT),
        ("q", CommandKind.EXIT),
        ("commands", CommandKind.HELP),
        ("tell me a joke", CommandKind.JOKE),
        ("fun fact", CommandKind.FACT),
        ("what time is it?", CommandKind.TIME),
        ("what is the date", CommandKind.TIME),
        ("coin flip", CommandKind.FLIP),
        ("roll a dice", CommandKind.ROLL),
        ("session", CommandKind.UPTIME),
        ("show history", CommandKind.HISTORY),
        ("cls", CommandKind.CLEAR),
        ("add", CommandKind.CALCULATOR),
        ("can you calculate for me?", CommandKind.CALCULATOR),
    ],
)
def test_route_recognises_fixed_commands(text: str, kind: CommandKind) -> None:
    assert route(text) == Command(kind)


def test_route_extracts_prefix_arguments() -> None:
    assert route("reverse abc") == Command(CommandKind.REVERSE, "abc")
    assert route("count   a   b") == Command(CommandKind.COUNT, "  a   b")


@pytest.mark.parametrize("text", ["reverse", "count", "hello", "reversed text", "tell me a story"])
def test_route_leaves_other_input_to_the_resolver(text: str) -> None:
    assert route(text) is None


def test_route_requires_exact_tokens() -> None:
    assert route("bye now") is None
    assert route("help me") is None

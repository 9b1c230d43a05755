"""Recognition of fixed-form chat commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .logging import get_logger

LOGGER = get_logger(__name__)


class CommandKind(str, Enum):
    EXIT = "exit"
    HELP = "help"
    JOKE = "joke"
    FACT = "fact"
    TIME = "time"
    FLIP = "flip"
    ROLL = "roll"
    UPTIME = "uptime"
    HISTORY = "history"
    CLEAR = "clear"
    REVERSE = "reverse"
    COUNT = "count"
    CALCULATOR = "calculator"


@dataclass(frozen=True)
class Command:
    """A routed command with its optional free-text argument."""

    kind: CommandKind
    argument: str = ""


EXIT_TOKENS = frozenset({"bye", "exit", "quit", "q"})
HELP_TOKENS = frozenset({"help", "manual", "commands"})
JOKE_TOKENS = frozenset({"joke", "tell me a joke", "tell a joke"})
FACT_TOKENS = frozenset({"fact", "tell me a fact", "fun fact"})
TIME_TOKENS = frozenset(
    {
        "time",
        "date",
        "what time is it?",
        "what time is it",
        "what's the time?",
        "what is the date?",
        "what is the date",
    }
)
FLIP_TOKENS = frozenset({"flip", "flip a coin", "coin flip", "coin"})
ROLL_TOKENS = frozenset({"roll", "roll a dice", "roll dice", "dice"})
UPTIME_TOKENS = frozenset({"uptime", "session"})
HISTORY_TOKENS = frozenset({"history", "show history"})
CLEAR_TOKENS = frozenset({"clear", "cls"})
CALCULATOR_TOKENS = frozenset(
    {
        "calc",
        "calculate",
        "calculator",
        "math",
        "add",
        "sum",
        "add numbers",
        "can you add integers for me?",
        "can you calculate for me?",
    }
)

REVERSE_PREFIX = "reverse "
COUNT_PREFIX = "count "

# Order matters: earlier groups win.
_EXACT_BEFORE_PREFIX: Tuple[Tuple[CommandKind, FrozenSet[str]], ...] = (
    (CommandKind.EXIT, EXIT_TOKENS),
    (CommandKind.HELP, HELP_TOKENS),
    (CommandKind.JOKE, JOKE_TOKENS),
    (CommandKind.FACT, FACT_TOKENS),
    (CommandKind.TIME, TIME_TOKENS),
    (CommandKind.FLIP, FLIP_TOKENS),
    (CommandKind.ROLL, ROLL_TOKENS),
    (CommandKind.UPTIME, UPTIME_TOKENS),
    (CommandKind.HISTORY, HISTORY_TOKENS),
    (CommandKind.CLEAR, CLEAR_TOKENS),
)
_PREFIXES: Tuple[Tuple[CommandKind, str], ...] = (
    (CommandKind.REVERSE, REVERSE_PREFIX),
    (CommandKind.COUNT, COUNT_PREFIX),
)


def route(text: str) -> Optional[Command]:
    """Map normalized input onto a :class:`Command`.

    Returns ``None`` when the input is not a command and should be handed to
    the response resolver instead.
    """
    for kind, tokens in _EXACT_BEFORE_PREFIX:
        if text in tokens:
            return _routed(Command(kind))
    for kind, prefix in _PREFIXES:
        if text.startswith(prefix) and len(text) > len(prefix):
            return _routed(Command(kind, text[len(prefix):]))
    if text in CALCULATOR_TOKENS:
        return _routed(Command(CommandKind.CALCULATOR))
    return None


def _routed(command: Command) -> Command:
    LOGGER.debug("Routed input to %s command", command.kind.value)
    return command


__all__ = ["Command", "CommandKind", "route"]

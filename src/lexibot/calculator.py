"""Calculator sub-session: ``<number> <operator> <number>`` arithmetic."""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

from .logging import get_logger
from .utils import normalise_text

LOGGER = get_logger(__name__)

EXIT_KEYWORDS = frozenset({"done", "exit", "back", "quit"})

INTRO_LINES: Tuple[str, ...] = (
    "🧮 Calculator Mode!",
    "Enter an expression like: 42 + 18",
    "Supported operators: + - * /",
    "Type 'done' to exit calculator.",
)
EXIT_MESSAGE = "Exiting calculator. Back to chat! 💬"
USAGE_WARNING = "⚠️  Please enter: <number> <operator> <number>  (e.g. 5 + 3)"
DIVISION_WARNING = "⚠️  Division by zero! The universe would implode. 🌌"

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_EXPRESSION_RE = re.compile(rf"^\s*({_NUMBER})\s*([^\s\d.])\s*({_NUMBER})\s*$")

OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "x": operator.mul,
    "/": operator.truediv,
}


class ExpressionError(ValueError):
    """Raised for input that is not a ``<number> <operator> <number>`` line."""


class UnknownOperatorError(ExpressionError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown operator {symbol!r}")
        self.symbol = symbol


@dataclass(frozen=True)
class Expression:
    left: float
    symbol: str
    right: float

    def evaluate(self) -> float:
        """Apply the operator; division by zero raises :class:`ZeroDivisionError`."""
        if self.symbol == "/" and self.right == 0:
            raise ZeroDivisionError("division by zero")
        return OPERATORS[self.symbol](self.left, self.right)

    def render(self, result: float) -> str:
        return f"{format_number(self.left)} {self.symbol} {format_number(self.right)} = {format_number(result)}"


def parse_expression(line: str) -> Expression:
    match = _EXPRESSION_RE.match(line)
    if match is None:
        raise ExpressionError(f"Malformed expression: {line!r}")
    left, symbol, right = match.groups()
    if symbol not in OPERATORS:
        raise UnknownOperatorError(symbol)
    return Expression(float(left), symbol, float(right))


def format_number(value: float) -> str:
    """Format with at most four decimals, dropping trailing zeros and point."""
    text = f"{value:.4f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


class CalculatorState(str, Enum):
    ACTIVE = "active"
    EXITED = "exited"


class CalculatorSession:
    """Nested read-eval state machine driven one line at a time."""

    def __init__(self) -> None:
        self.state = CalculatorState.ACTIVE

    @property
    def active(self) -> bool:
        return self.state is CalculatorState.ACTIVE

    def feed(self, line: str) -> str:
        """Process one line and return the reply to show."""
        if not self.active:
            raise RuntimeError("Calculator session has already exited")
        if normalise_text(line) in EXIT_KEYWORDS:
            self.state = CalculatorState.EXITED
            return EXIT_MESSAGE
        return self.evaluate(line)

    def evaluate(self, line: str) -> str:
        try:
            expression = parse_expression(line)
            result = expression.evaluate()
        except UnknownOperatorError as exc:
            LOGGER.debug("Rejected calculator operator %r", exc.symbol)
            return f"⚠️  Unknown operator '{exc.symbol}'. Use + - * /"
        except ExpressionError:
            LOGGER.debug("Rejected calculator input %r", line)
            return USAGE_WARNING
        except ZeroDivisionError:
            return DIVISION_WARNING
        return f"✅ {expression.render(result)}"

    def close(self) -> None:
        """End the session silently, as on end of input."""
        self.state = CalculatorState.EXITED


__all__ = [
    "CalculatorSession",
    "CalculatorState",
    "Expression",
    "ExpressionError",
    "UnknownOperatorError",
    "format_number",
    "parse_expression",
]

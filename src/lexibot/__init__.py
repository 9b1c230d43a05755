"""Lexibot package."""

from .calculator import CalculatorSession, format_number, parse_expression
from .config import BotConfig, load_config
from .engine import ChatEngine
from .lexicon import InternalError, Lexicon, LexiconError, load_lexicon
from .resolver import ResponseResolver
from .router import Command, CommandKind, route
from .session import Session, SessionClock
from .utils import normalise_text

__all__ = [
    "BotConfig",
    "CalculatorSession",
    "ChatEngine",
    "Command",
    "CommandKind",
    "InternalError",
    "Lexicon",
    "LexiconError",
    "ResponseResolver",
    "Session",
    "SessionClock",
    "format_number",
    "load_config",
    "load_lexicon",
    "normalise_text",
    "parse_expression",
    "route",
]

__version__ = "0.1.0"

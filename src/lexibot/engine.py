"""Input classification, dispatch and the interactive read loop."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, Optional

from .calculator import INTRO_LINES, CalculatorSession
from .config import BotConfig
from .lexicon import InternalError, Lexicon, load_lexicon
from .logging import get_logger
from .presenter import Presenter, build_presenter
from .resolver import ResponseResolver
from .router import Command, CommandKind, route
from .session import Session
from .utils import count_words, make_rng, normalise_text, reverse_text
from .utils.random import IntegerSource

LOGGER = get_logger(__name__)

LineReader = Callable[[str], Optional[str]]
Clock = Callable[[], datetime]

DATETIME_FORMAT = "%A, %B %d, %Y  %I:%M:%S %p"
YES_ANSWERS = frozenset({"y", "yes"})


def read_line(prompt: str) -> Optional[str]:
    """Read one line from stdin; ``None`` signals end of input."""
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        return None


class ChatEngine:
    """Routes each input line to a command, the calculator or the resolver."""

    def __init__(
        self,
        lexicon: Lexicon,
        presenter: Presenter,
        rng: IntegerSource,
        *,
        session: Optional[Session] = None,
        history_window: int = 20,
        min_substring_length: int = 3,
        banner: bool = True,
        now: Clock = datetime.now,
    ) -> None:
        self.lexicon = lexicon
        self.presenter = presenter
        self.rng = rng
        self.session = session or Session()
        self.history_window = history_window
        self.banner = banner
        self.resolver = ResponseResolver(lexicon, min_substring_length=min_substring_length)
        self.calculator: Optional[CalculatorSession] = None
        self._now = now
        self._handlers: Dict[CommandKind, Callable[[Command], None]] = {
            CommandKind.EXIT: self._exit,
            CommandKind.HELP: self._help,
            CommandKind.JOKE: self._joke,
            CommandKind.FACT: self._fact,
            CommandKind.TIME: self._time,
            CommandKind.FLIP: self._flip,
            CommandKind.ROLL: self._roll,
            CommandKind.UPTIME: self._uptime,
            CommandKind.HISTORY: self._history,
            CommandKind.CLEAR: self._clear,
            CommandKind.REVERSE: self._reverse,
            CommandKind.COUNT: self._count,
            CommandKind.CALCULATOR: self._enter_calculator,
        }

    @classmethod
    def from_config(
        cls,
        config: BotConfig,
        *,
        presenter: Optional[Presenter] = None,
        rng: Optional[IntegerSource] = None,
        session: Optional[Session] = None,
        now: Clock = datetime.now,
    ) -> ChatEngine:
        lexicon = load_lexicon(config.lexicon.path, include_defaults=config.lexicon.include_defaults)
        return cls(
            lexicon,
            presenter or build_presenter(color=config.presenter.color),
            rng or make_rng(config.session.seed),
            session=session,
            history_window=config.session.history_window,
            min_substring_length=config.session.min_substring_length,
            banner=config.presenter.banner,
            now=now,
        )

    @property
    def in_calculator(self) -> bool:
        return self.calculator is not None

    # Main loop -------------------------------------------------------------------
    def run(self, reader: LineReader = read_line, *, welcome: bool = True) -> None:
        if self.banner:
            self.presenter.show_banner()
        if welcome and not self.welcome(reader):
            return
        LOGGER.info("Session started")
        while self.session.running:
            line = reader(self.presenter.prompt(calculator=self.in_calculator))
            if line is None:
                LOGGER.info("End of input")
                break
            self.feed(line)
        if self.calculator is not None:
            self.calculator.close()
            self.calculator = None
        self.session.stop()
        self.presenter.show_goodbye(self.session.uptime(), self.session.message_count)
        LOGGER.info("Session ended after %d messages", self.session.message_count)

    def welcome(self, reader: LineReader) -> bool:
        """Ask whether to start; returns ``False`` when the user declines."""
        self.presenter.say("Welcome! Would you like to start chatting? (y/n)")
        answer = reader(self.presenter.prompt())
        if answer is None:
            return False
        if normalise_text(answer) not in YES_ANSWERS:
            self.presenter.say("No worries, see you next time! 👋")
            return False

        self.presenter.say("Would you like to see what I can do? (y/n)")
        answer = reader(self.presenter.prompt())
        if answer is None:
            return False
        if normalise_text(answer) in YES_ANSWERS:
            self.presenter.show_help()
        self.presenter.show_section(
            ["Let's chat! Type anything or 'help' for commands. Type 'bye' to exit."]
        )
        return True

    def feed(self, line: str) -> None:
        """Hand one raw line to whichever mode is active."""
        if self.calculator is not None:
            self.presenter.say(self.calculator.feed(line))
            if not self.calculator.active:
                self.calculator = None
            return
        self.handle(line)

    # Chat mode -------------------------------------------------------------------
    def handle(self, raw: str) -> None:
        text = normalise_text(raw)
        if not text:
            return
        self.session.record(text)
        command = route(text)
        if command is None:
            self.presenter.say(self.resolver.resolve(text))
            return
        self._handlers[command.kind](command)

    def _exit(self, command: Command) -> None:
        self.session.stop()

    def _help(self, command: Command) -> None:
        self.presenter.show_help()

    def _joke(self, command: Command) -> None:
        try:
            self.presenter.say(self.lexicon.random_joke(self.rng))
        except InternalError:
            LOGGER.warning("Joke requested but the lexicon has none")
            self.presenter.say("I'm all out of jokes right now.")

    def _fact(self, command: Command) -> None:
        try:
            self.presenter.say(self.lexicon.random_fact(self.rng))
        except InternalError:
            LOGGER.warning("Fact requested but the lexicon has none")
            self.presenter.say("I'm all out of facts right now.")

    def _time(self, command: Command) -> None:
        self.presenter.say(f"🕐 {self._now().strftime(DATETIME_FORMAT)}")

    def _flip(self, command: Command) -> None:
        side = "Heads" if int(self.rng.integers(0, 2)) == 0 else "Tails"
        self.presenter.say(f"{side}! 🪙")

    def _roll(self, command: Command) -> None:
        self.presenter.say(f"🎲 You rolled a {int(self.rng.integers(1, 7))}!")

    def _uptime(self, command: Command) -> None:
        self.presenter.say(
            f"⏱️  Session uptime: {self.session.uptime()} | Messages: {self.session.message_count}"
        )

    def _history(self, command: Command) -> None:
        self.presenter.show_history(self.session.recent(self.history_window))

    def _clear(self, command: Command) -> None:
        self.presenter.clear_screen(banner=self.banner)
        self.presenter.say("Screen cleared! ✨")

    def _reverse(self, command: Command) -> None:
        self.presenter.say(f'🔄 "{reverse_text(command.argument)}"')

    def _count(self, command: Command) -> None:
        self.presenter.say(f"📝 Word count: {count_words(command.argument)}")

    def _enter_calculator(self, command: Command) -> None:
        self.calculator = CalculatorSession()
        self.presenter.show_section(INTRO_LINES)


__all__ = ["ChatEngine", "LineReader", "read_line"]

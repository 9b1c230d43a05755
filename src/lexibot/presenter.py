"""Terminal presentation: banner, help, history and bot lines."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

import typer

from .session import HistoryView

Echo = Callable[[str], None]

SEPARATOR_WIDTH = 58
BOT_PREFIX = "  Bot ◂ "
CONTINUATION = " " * len(BOT_PREFIX)
CHAT_PROMPT = "  You ▸ "
CALC_PROMPT = "  Calc ▸ "

BANNER_LINES = (
    "  ╔══════════════════════════════════════════════════════╗",
    "  ║                                                      ║",
    "  ║    ╦  ╔═╗═╗ ╦╦╔╗ ╔═╗╔╦╗                              ║",
    "  ║    ║  ║╣ ╔╩╦╝║╠╩╗║ ║ ║                               ║",
    "  ║    ╩═╝╚═╝╩ ╚═╩╚═╝╚═╝ ╩                               ║",
    "  ║                                                      ║",
    "  ║    Console Chat Bot                                  ║",
    "  ║                                                      ║",
    "  ╚══════════════════════════════════════════════════════╝",
)

HELP_ROWS = (
    ("help / manual", "Show this command list"),
    ("calc / calculate", "Math calculator (+ - * /)"),
    ("joke", "Tell a random joke"),
    ("fact", "Share a random fun fact"),
    ("time / date", "Show current date & time"),
    ("flip", "Flip a coin"),
    ("roll", "Roll a dice (1-6)"),
    ("reverse <text>", "Reverse a string"),
    ("count <text>", "Count words in text"),
    ("history", "Show conversation history"),
    ("uptime", "Show session duration"),
    ("clear", "Clear the screen"),
    ("bye / exit / quit", "End the conversation"),
)
HELP_FOOTER = (
    "You can also just chat naturally: try greetings,",
    "questions about me, or ask about C++ and more!",
)


class Presenter:
    """Plain-text presenter; subclasses only change how text is styled."""

    def __init__(self, echo: Optional[Echo] = None) -> None:
        self._echo = echo or typer.echo

    # Styling hooks ---------------------------------------------------------------
    def _bot(self, text: str) -> str:
        return text

    def _heading(self, text: str) -> str:
        return text

    def _dim(self, text: str) -> str:
        return text

    def _prompt(self, text: str) -> str:
        return text

    # Output ----------------------------------------------------------------------
    def write(self, text: str = "") -> None:
        self._echo(text)

    def say(self, message: str) -> None:
        """Print a bot reply; multi-line replies are indented under the prefix."""
        self.say_lines(message.split("\n"))

    def say_lines(self, lines: Sequence[str]) -> None:
        for index, line in enumerate(lines):
            prefix = self._bot(BOT_PREFIX) if index == 0 else CONTINUATION
            self.write(f"{prefix}{line}")

    def separator(self) -> None:
        self.write(self._dim("─" * SEPARATOR_WIDTH))

    def prompt(self, calculator: bool = False) -> str:
        return self._prompt(CALC_PROMPT if calculator else CHAT_PROMPT)

    def show_banner(self) -> None:
        self.write()
        for line in BANNER_LINES:
            self.write(self._heading(line))
        self.write()

    def show_help(self) -> None:
        self.write()
        self.write(self._heading("  AVAILABLE COMMANDS"))
        for command, description in HELP_ROWS:
            self.write(f"    {command:<20} {self._dim(description)}")
        self.write()
        for line in HELP_FOOTER:
            self.write(self._dim(f"    {line}"))

    def show_history(self, view: HistoryView) -> None:
        if not view.entries:
            self.say("No conversation history yet!")
            return
        self.write()
        self.write(self._heading("  CONVERSATION HISTORY"))
        for position, text in view.entries:
            self.write(f"{self._dim(f'  {position:>3}. ')}{text}")
        self.write()
        self.write(self._dim(f"  Showing last {view.shown} of {view.total} messages."))

    def show_section(self, lines: Iterable[str]) -> None:
        self.write()
        self.separator()
        self.say_lines(list(lines))
        self.separator()

    def clear_screen(self, banner: bool = True) -> None:
        """Redraw the banner; plain output has no screen to clear."""
        if banner:
            self.show_banner()

    def show_goodbye(self, uptime: str, messages: int) -> None:
        self.write()
        self.separator()
        self.say("Goodbye! Thanks for chatting. 👋")
        self.write(self._dim(f"  Session lasted: {uptime} | Messages: {messages}"))
        self.separator()
        self.write()


class StyledPresenter(Presenter):
    """ANSI-coloured presenter built on ``typer.style``."""

    def _bot(self, text: str) -> str:
        return typer.style(text, fg=typer.colors.CYAN, bold=True)

    def _heading(self, text: str) -> str:
        return typer.style(text, fg=typer.colors.YELLOW, bold=True)

    def _dim(self, text: str) -> str:
        return typer.style(text, dim=True)

    def _prompt(self, text: str) -> str:
        return typer.style(text, fg=typer.colors.GREEN, bold=True)

    def clear_screen(self, banner: bool = True) -> None:
        typer.clear()
        if banner:
            self.show_banner()


def build_presenter(color: bool = True, echo: Optional[Echo] = None) -> Presenter:
    return StyledPresenter(echo) if color else Presenter(echo)


__all__ = ["Presenter", "StyledPresenter", "build_presenter"]

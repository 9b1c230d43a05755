"""Command line interface for lexibot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import click
import typer

from .config import BotConfig, load_config
from .engine import ChatEngine
from .lexicon import LexiconError, load_lexicon
from .logging import configure_logging, get_logger
from .router import CommandKind, route
from .utils import normalise_text

LOGGER = get_logger(__name__)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to a YAML or JSON configuration file.",
)
LEXICON_OPTION = typer.Option(
    None,
    "--lexicon",
    help="Extra lexicon file layered over the built-in phrases.",
)
SEED_OPTION = typer.Option(
    None,
    help="Seed for jokes, facts, coin flips and dice rolls.",
)
COLOR_OPTION = typer.Option(
    True,
    "--color/--no-color",
    help="Style output with ANSI colours (overrides the configuration file).",
)
SKIP_WELCOME_OPTION = typer.Option(
    False,
    "--skip-welcome",
    help="Start chatting straight away.",
)
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Logging level for diagnostics written to stderr.",
)
SKIP_DEFAULTS_OPTION = typer.Option(
    False,
    "--skip-defaults",
    help="Validate the file on its own.",
)
ASK_TEXT_ARGUMENT = typer.Argument(..., help="What to say to the bot.")

CALCULATOR_HINT = "🧮 Calculator mode needs an interactive session: run `lexibot chat`."

app = typer.Typer(help="A terminal chat bot that answers from a fixed phrase lexicon.")


def _overrides(
    lexicon_path: Optional[Path] = None,
    seed: Optional[int] = None,
    color: Optional[bool] = None,
    skip_welcome: bool = False,
    log_level: Optional[str] = None,
) -> list[dict[str, Any]]:
    overrides: list[dict[str, Any]] = []
    if lexicon_path is not None:
        overrides.append({"lexicon": {"path": lexicon_path}})
    if seed is not None:
        overrides.append({"session": {"seed": seed}})
    if color is not None:
        overrides.append({"presenter": {"color": color}})
    if skip_welcome:
        overrides.append({"session": {"welcome": False}})
    if log_level is not None:
        overrides.append({"log_level": log_level})
    return overrides


def _load_config(config_path: Optional[Path], overrides: list[dict[str, Any]]) -> BotConfig:
    try:
        config = load_config(config_path, overrides)
        configure_logging(level=config.log_level)
    except (OSError, TypeError, ValueError) as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    return config


def _color_override(ctx: typer.Context, color: bool) -> Optional[bool]:
    """Only an explicit ``--color``/``--no-color`` beats the configuration file."""
    source = ctx.get_parameter_source("color")
    if source is click.core.ParameterSource.COMMANDLINE:
        return color
    return None


def _load_engine(config: BotConfig) -> ChatEngine:
    try:
        return ChatEngine.from_config(config)
    except (OSError, TypeError, LexiconError) as exc:
        typer.echo(f"Could not load lexicon: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def chat(
    ctx: typer.Context,
    config_path: Optional[Path] = CONFIG_OPTION,
    lexicon_path: Optional[Path] = LEXICON_OPTION,
    seed: Optional[int] = SEED_OPTION,
    color: bool = COLOR_OPTION,
    skip_welcome: bool = SKIP_WELCOME_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
) -> None:
    """Start an interactive chat session on the terminal."""

    config = _load_config(
        config_path,
        _overrides(lexicon_path, seed, _color_override(ctx, color), skip_welcome, log_level),
    )
    engine = _load_engine(config)
    engine.run(welcome=config.session.welcome)


@app.command()
def ask(
    text: List[str] = ASK_TEXT_ARGUMENT,
    config_path: Optional[Path] = CONFIG_OPTION,
    lexicon_path: Optional[Path] = LEXICON_OPTION,
    seed: Optional[int] = SEED_OPTION,
    log_level: Optional[str] = LOG_LEVEL_OPTION,
) -> None:
    """Answer a single utterance and exit."""

    config = _load_config(
        config_path,
        _overrides(lexicon_path, seed, color=False, log_level=log_level),
    )
    engine = _load_engine(config)
    utterance = " ".join(text)
    command = route(normalise_text(utterance))
    if command is not None and command.kind is CommandKind.CALCULATOR:
        engine.presenter.say(CALCULATOR_HINT)
        return
    engine.handle(utterance)
    if not engine.session.running:
        engine.presenter.say("Goodbye! Thanks for chatting. 👋")


@app.command()
def lexicon(
    lexicon_path: Optional[Path] = LEXICON_OPTION,
    skip_defaults: bool = SKIP_DEFAULTS_OPTION,
) -> None:
    """Validate a lexicon and print its size as JSON."""

    try:
        loaded = load_lexicon(lexicon_path, include_defaults=not skip_defaults)
    except (OSError, TypeError, LexiconError) as exc:
        typer.echo(f"Invalid lexicon: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(loaded.counts(), indent=2))
    LOGGER.info("Validated lexicon %s", lexicon_path or "defaults")


if __name__ == "__main__":
    app()

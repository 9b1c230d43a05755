from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from conftest import FixedRng
from lexibot.lexicon import InternalError, Lexicon, LexiconError, load_lexicon


def test_default_lexicon_contents(lexicon: Lexicon) -> None:
    assert lexicon.counts() == {"responses": 34, "aliases": 27, "jokes": 10, "facts": 10}
    for target in lexicon.aliases.values():
        assert target in lexicon.responses


def test_lexicon_is_read_only(lexicon: Lexicon) -> None:
    with pytest.raises(TypeError):
        lexicon.responses["new"] = "value"  # type: ignore[index]


def test_keys_are_normalised_on_load() -> None:
    lexicon = Lexicon.from_dict(
        {"responses": {"  Hello There ": "General Kenobi"}, "aliases": {"HI THERE": "Hello There"}}
    )
    assert lexicon.lookup("hello there") == "General Kenobi"
    assert lexicon.resolve_alias("hi there") == "hello there"


@pytest.mark.parametrize(
    "data",
    [
        {"responses": {"hi": "hello"}, "aliases": {"yo": "hey"}},
        {"responses": {"hi": "hello"}, "aliases": {"hi": "hi"}},
        {"responses": {"hi": ""}},
        {"responses": {"hi": "hello"}, "greetings": {}},
        {"responses": ["hi"]},
    ],
)
def test_invalid_lexicon_data_is_rejected(data: dict) -> None:
    with pytest.raises(LexiconError):
        Lexicon.from_dict(data)


def test_random_content_uses_injected_generator(lexicon: Lexicon) -> None:
    rng = FixedRng(3, 7)
    assert lexicon.random_joke(rng) == lexicon.jokes[3]
    assert lexicon.random_fact(rng) == lexicon.facts[7]
    assert rng.calls == [(0, 10), (0, 10)]


def test_empty_content_lists_raise_internal_error() -> None:
    lexicon = Lexicon.from_dict({"responses": {"hi": "hello"}})
    with pytest.raises(InternalError):
        lexicon.random_joke(FixedRng())
    with pytest.raises(InternalError):
        lexicon.random_fact(FixedRng())


def test_load_lexicon_layers_file_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "extra.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "responses": {"Pizza": "Pineapple belongs on it."},
                "aliases": {"pie": "pizza"},
                "jokes": ["A brand new joke."],
            }
        ),
        encoding="utf-8",
    )
    lexicon = load_lexicon(path)
    assert lexicon.lookup("pizza") == "Pineapple belongs on it."
    assert lexicon.resolve_alias("pie") == "pizza"
    assert lexicon.lookup("hello") is not None
    assert lexicon.jokes[-1] == "A brand new joke."
    assert len(lexicon.jokes) == 11


def test_load_lexicon_without_defaults(tmp_path: Path) -> None:
    path = tmp_path / "only.json"
    path.write_text('{"responses": {"ping": "pong"}}', encoding="utf-8")
    lexicon = load_lexicon(path, include_defaults=False)
    assert lexicon.counts() == {"responses": 1, "aliases": 0, "jokes": 0, "facts": 0}

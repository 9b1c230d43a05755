from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from lexibot.config import BotConfig, SessionConfig, load_config
from lexibot.logging import configure_logging


def test_defaults() -> None:
    config = load_config()
    assert config.session.history_window == 20
    assert config.session.min_substring_length == 3
    assert config.session.seed is None
    assert config.lexicon.path is None
    assert config.presenter.color is True
    assert config.log_level == "WARNING"


def test_load_yaml_with_overrides(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({"session": {"history_window": 5, "seed": 3}, "presenter": {"color": False}}),
        encoding="utf-8",
    )
    config = load_config(path, overrides=[{"session": {"seed": 11}}, {"lexicon": {"path": "extra.yaml"}}])
    assert config.session.history_window == 5
    assert config.session.seed == 11
    assert config.presenter.color is False
    assert config.lexicon.path == Path("extra.yaml")


def test_round_trip_through_dict(tmp_path: Path) -> None:
    config = load_config(overrides=[{"lexicon": {"path": tmp_path / "x.json"}}])
    payload = config.to_dict()
    assert payload["lexicon"]["path"] == str(tmp_path / "x.json")
    assert BotConfig.from_dict(payload) == config


def test_non_mapping_root_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(path)


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        SessionConfig(history_window=0)
    with pytest.raises(TypeError):
        BotConfig.from_dict({"session": {"unknown": 1}})


def test_configure_logging_accepts_level_names() -> None:
    handler = logging.NullHandler()
    try:
        logger = configure_logging(level="debug", handler=handler, logger_name="lexibot.test")
        assert logger.name == "lexibot.test"
        assert logging.getLogger().level == logging.DEBUG
        with pytest.raises(ValueError):
            configure_logging(level="chatty")
    finally:
        configure_logging(level=logging.WARNING, handler=logging.NullHandler())

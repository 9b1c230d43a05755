"""Bundled data for the lexibot package."""

from __future__ import annotations

from importlib import resources
from typing import Any, Dict

import yaml

DEFAULT_LEXICON = "default_lexicon.yaml"


def load_default_lexicon_data() -> Dict[str, Any]:
    with resources.files(__package__).joinpath(DEFAULT_LEXICON).open("r", encoding="utf-8") as stream:
        return yaml.safe_load(stream)


__all__ = ["DEFAULT_LEXICON", "load_default_lexicon_data"]

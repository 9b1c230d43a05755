"""Utility helpers shared across the lexibot package."""

from .io import load_yaml_or_json
from .random import choose, make_rng, uniform_index
from .text import count_words, normalise_text, reverse_text, split_words

__all__ = [
    "choose",
    "count_words",
    "load_yaml_or_json",
    "make_rng",
    "normalise_text",
    "reverse_text",
    "split_words",
    "uniform_index",
]

from __future__ import annotations

from .engine import filter_unit, filter_units
from .matcher import compile_token, compile_tokens, matches_all
from .tokenizer import tokenize

__all__ = [
    "tokenize",
    "compile_token",
    "compile_tokens",
    "matches_all",
    "filter_unit",
    "filter_units",
]

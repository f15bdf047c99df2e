from __future__ import annotations

"""
Query Tokenizer.

Turns the raw text typed by the user into the ordered token list consumed
by the matcher.
"""

from typing import List, Optional


def tokenize(raw: Optional[str]) -> List[str]:
    """
    Split a raw query into lower-cased search tokens.

    The split happens on the literal space character only. Individual tokens
    are not trimmed and empty tokens produced by consecutive spaces are kept;
    an empty token matches every haystack.

    Args:
        raw: Query text as typed. None is treated as an empty query.

    Returns:
        List[str]: Tokens in input order, or an empty list for an empty query.
    """
    query = (raw or "").lower()
    if query == "":
        return []
    return query.split(" ")

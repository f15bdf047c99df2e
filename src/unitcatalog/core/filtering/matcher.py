from __future__ import annotations

"""
Token Match Predicate.

Each query token is treated as a regular expression and searched for
(not fully matched) inside a lower-cased haystack. All tokens must be found
for the haystack to match. Tokens that are not valid patterns fail closed.
"""

import logging
import re
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

# A token list may be handed over raw or already compiled by compile_tokens()
TokenPattern = Optional[re.Pattern]

# -----------------------------------------------------------------------------
# PATTERN COMPILATION
# -----------------------------------------------------------------------------

def compile_token(token: str) -> TokenPattern:
    """
    Compile a single token into a search pattern.

    Args:
        token: Lower-cased query token.

    Returns:
        Optional[re.Pattern]: Compiled pattern, or None if the token is malformed.
    """
    try:
        return re.compile(token)
    except re.error as e:
        logger.debug(f"Token '{token}' is not a valid pattern ({e}); treated as a miss.")
        return None


def compile_tokens(tokens: Sequence[str]) -> List[TokenPattern]:
    """
    Compile every token once, keeping positions of malformed tokens as None.

    Args:
        tokens: Query tokens in order.

    Returns:
        List[Optional[re.Pattern]]: One entry per token.
    """
    return [compile_token(t) for t in tokens]

# -----------------------------------------------------------------------------
# MATCHING
# -----------------------------------------------------------------------------

def matches_all(tokens: Sequence[Union[str, TokenPattern]], haystack: str) -> bool:
    """
    Verify that every token is found somewhere in the haystack.

    Evaluation follows token order and stops at the first miss. An empty
    token sequence matches any haystack.

    Args:
        tokens: Raw token strings or patterns from compile_tokens().
        haystack: Lower-cased text to search.

    Returns:
        bool: True if all tokens are found, False otherwise.
    """
    for token in tokens:
        pattern = compile_token(token) if isinstance(token, str) else token
        if pattern is None or pattern.search(haystack) is None:
            return False
    return True

from __future__ import annotations

"""
Hierarchical Unit Filter Engine.

Walks a unit tree bottom-up and decides, for every node, whether it
survives a query. Nodes that match keep their content; ancestors kept only
because a descendant matched are stripped of their own 'meta' and 'patches'.

The driver deep-copies the caller's tree once per pass; the recursive step
then mutates that private copy in place.
"""

import copy
import logging
from typing import Any, List, Optional, Sequence

from unitcatalog.core.filtering.matcher import TokenPattern, compile_tokens, matches_all
from unitcatalog.domain.unit_models import UNKNOWN_PATCH, FilterResult, Unit, UnitTree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def filter_units(
        units: UnitTree,
        tokens: Sequence[str],
        compact_mode: bool = True,
) -> FilterResult:
    """
    Filter a list of root units against a tokenized query.

    An empty token list disables filtering: the result holds an unmodified
    copy of the tree and search mode is off. Otherwise every root is filtered
    independently and only surviving roots are returned, in source order.

    Args:
        units: Root units of the source document. Never modified.
        tokens: Query tokens as produced by tokenize().
        compact_mode: Inject placeholder imagery for matches without patches.

    Returns:
        FilterResult: Fresh filtered tree plus the search-mode flag.
    """
    working: UnitTree = copy.deepcopy(list(units or []))
    token_tuple = tuple(tokens)

    if not token_tuple:
        return FilterResult(units=working, tokens=token_tuple, search_mode=False)

    patterns = compile_tokens(token_tuple)
    kept = [unit for unit in working if filter_unit(unit, patterns, compact_mode)]

    logger.debug(
        f"Query {list(token_tuple)} kept {len(kept)} of {len(working)} root units "
        f"(compact={compact_mode})."
    )
    return FilterResult(units=kept, tokens=token_tuple, search_mode=True)


def filter_unit(unit: Unit, patterns: Sequence[TokenPattern], compact_mode: bool) -> bool:
    """
    Filter a single node and its descendants in place.

    Must only be called on a node the caller owns (see filter_units).

    Args:
        unit: Node to transform.
        patterns: Compiled query tokens.
        compact_mode: Inject placeholder imagery for direct matches without patches.

    Returns:
        bool: True if the node should be kept by its parent.
    """
    # 1. Children first, so ancestors see the already-pruned subtree
    subunits = unit.get("subunits")
    matching_subunits: List[Unit] = []
    if isinstance(subunits, list):
        matching_subunits = [
            child for child in subunits
            if isinstance(child, dict) and filter_unit(child, patterns, compact_mode)
        ]
        unit["subunits"] = matching_subunits

    has_matching_subunits = len(matching_subunits) > 0

    # 2. The node's own fields
    pattern_found = _matches_own_fields(unit, patterns)

    # 3. Placeholder and redaction policy
    if compact_mode and pattern_found and unit.get("patches") is None:
        unit["patches"] = [UNKNOWN_PATCH.to_dict()]

    if not pattern_found and has_matching_subunits:
        unit.pop("patches", None)
        unit.pop("meta", None)
        return True

    return pattern_found

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _matches_own_fields(unit: Unit, patterns: Sequence[TokenPattern]) -> bool:
    """Return True if the name, description or tags satisfy every token."""
    meta = unit.get("meta")
    if not isinstance(meta, dict):
        meta = {}

    haystacks = (unit.get("name"), meta.get("description"), meta.get("tags"))
    return any(
        matches_all(patterns, text.lower())
        for text in (_as_text(h) for h in haystacks)
        if text
    )


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)

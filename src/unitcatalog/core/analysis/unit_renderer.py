from __future__ import annotations

"""
Unit Tree Renderer.

Converts unit trees into ASCII representations for terminal output and
builds the navigation index over the top-level units. Units are drawn in
document order; the renderer never reorders siblings.
"""

from typing import Any, Dict, List

from unitcatalog.domain.constants import ANCHOR_PREFIX
from unitcatalog.domain.unit_models import RootAnchor, Unit, UnitTree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_jump_index(units: UnitTree) -> List[RootAnchor]:
    """
    Assign a stable in-page identifier to every root unit.

    Args:
        units: Root units in display order.

    Returns:
        List[RootAnchor]: One anchor per root, keyed by position.
    """
    return [
        RootAnchor(name=str(unit.get("name") or ""), key=f"{ANCHOR_PREFIX}{idx}")
        for idx, unit in enumerate(units)
    ]


def render_unit_tree(
        units: UnitTree,
        lines: List[str],
        prefix: str = "",
        compact: bool = True,
        search_mode: bool = False,
) -> None:
    """
    Recursively transform a unit tree into a list of strings.

    Compact mode prints one line per unit with its first thumbnail. Detail
    mode adds every full-size image and the description/tags as child lines.

    Args:
        units: Units of the current level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        compact: Select compact (True) or detail (False) rendering.
        search_mode: Whether the tree is the result of a query.
    """
    total = len(units)

    for i, unit in enumerate(units):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

        lines.append(f"{prefix}{connector}{_label(unit, compact, search_mode)}")

        if not compact:
            for detail in _detail_lines(unit):
                lines.append(f"{child_prefix}· {detail}")

        subunits = unit.get("subunits")
        if isinstance(subunits, list) and subunits:
            render_unit_tree(
                subunits,
                lines,
                prefix=child_prefix,
                compact=compact,
                search_mode=search_mode,
            )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _label(unit: Unit, compact: bool, search_mode: bool) -> str:
    """Build the headline for a unit."""
    name = unit.get("name")
    if not name:
        name = "(unnamed)" if search_mode else "(group)"

    if not compact:
        return str(name)

    patches = _patches(unit)
    if patches and patches[0].get("thumb"):
        return f"{name} [{patches[0]['thumb']}]"
    return str(name)


def _detail_lines(unit: Unit) -> List[str]:
    """Collect image paths and metadata shown in detail mode."""
    details = [f"image: {p['full']}" for p in _patches(unit) if p.get("full")]

    meta = unit.get("meta")
    if isinstance(meta, dict):
        if meta.get("description"):
            details.append(f"description: {meta['description']}")
        if meta.get("tags"):
            details.append(f"tags: {meta['tags']}")
    return details


def _patches(unit: Unit) -> List[Dict[str, Any]]:
    patches = unit.get("patches")
    if not isinstance(patches, list):
        return []
    return [p for p in patches if isinstance(p, dict)]

from __future__ import annotations

"""
Unit Catalog Data Models.

Describes the hierarchical unit documents consumed by the filtering engine
and the value objects returned to the presentation layer. The tree itself
stays a plain JSON structure so that filtered output keeps the exact shape
of the source document.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from unitcatalog.domain.constants import UNKNOWN_IMAGE_PATH

# A unit is a JSON object with optional 'name', 'subunits', 'meta' and 'patches'
Unit = Dict[str, Any]
UnitTree = List[Unit]

# -----------------------------------------------------------------------------
# VALUE OBJECTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Patch:
    """
    Image reference attached to a unit.

    Attributes:
        full: Path to the full-size image.
        thumb: Path to the thumbnail image.
    """
    full: str
    thumb: str

    def to_dict(self) -> Dict[str, str]:
        return {"full": self.full, "thumb": self.thumb}


UNKNOWN_PATCH = Patch(full=UNKNOWN_IMAGE_PATH, thumb=UNKNOWN_IMAGE_PATH)


@dataclass(frozen=True)
class RootAnchor:
    """
    Navigation entry for a top-level unit of the rendered catalog.

    Attributes:
        name: Label of the root unit (may be empty).
        key: Stable in-page identifier derived from the root position.
    """
    name: str
    key: str


@dataclass(frozen=True)
class FilterResult:
    """
    Outcome of a single filtering pass.

    Attributes:
        units: Freshly built tree, never shared with the source document.
        tokens: Query tokens the pass was evaluated with.
        search_mode: True when a non-empty query was applied.
    """
    units: UnitTree = field(default_factory=list)
    tokens: Tuple[str, ...] = ()
    search_mode: bool = False

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class CatalogLoadError(Exception):
    """Raised when a catalog document cannot be read or has the wrong shape."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Unable to load catalog from '{source}': {reason}")
        self.source = source
        self.reason = reason

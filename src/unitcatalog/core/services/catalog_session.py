from __future__ import annotations

"""
Catalog Session Service.

Holds the state of one catalog view: the loaded source document, the
current query and the display mode. Every call to view() runs a complete
filtering pass over the source; nothing is cached between queries.
"""

import copy
import logging
from typing import List

from unitcatalog.core.analysis.unit_renderer import build_jump_index
from unitcatalog.core.filtering import filter_units, tokenize
from unitcatalog.domain.constants import catalog_title
from unitcatalog.domain.unit_models import FilterResult, RootAnchor, UnitTree

logger = logging.getLogger(__name__)


class CatalogSession:
    """
    Stateful facade over the filter engine for a single catalog.

    Attributes:
        catalog: Registry key of the catalog (e.g. 'ua').
        compact_mode: Current display mode.
    """

    def __init__(self, units: UnitTree, catalog: str = "", compact_mode: bool = True) -> None:
        # Private copy so later changes to the caller's document do not leak in
        self._source: UnitTree = copy.deepcopy(list(units or []))
        self._tokens: List[str] = []
        self.catalog = catalog
        self.compact_mode = compact_mode

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return catalog_title(self.catalog)

    @property
    def tokens(self) -> List[str]:
        return list(self._tokens)

    @property
    def search_mode(self) -> bool:
        return len(self._tokens) > 0

    @property
    def root_count(self) -> int:
        return len(self._source)

    def set_query(self, raw: str) -> None:
        """Replace the current query with the tokens of the given text."""
        self._tokens = tokenize(raw)
        logger.debug(f"Query updated: {self._tokens}")

    def reset_query(self) -> None:
        """Clear the query, returning the view to the full catalog."""
        self._tokens = []

    def toggle_compact_mode(self) -> bool:
        """Switch between compact and detail display; returns the new mode."""
        self.compact_mode = not self.compact_mode
        return self.compact_mode

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def view(self) -> FilterResult:
        """Run a filtering pass with the current query and display mode."""
        return filter_units(self._source, self._tokens, compact_mode=self.compact_mode)

    def jump_index(self) -> List[RootAnchor]:
        """Navigation anchors for the roots of the current view."""
        return build_jump_index(self.view().units)

from __future__ import annotations

"""
Unit Catalog.

Browses hierarchical unit catalogs and narrows them with free-text queries.
"""

__version__ = "1.0.0"

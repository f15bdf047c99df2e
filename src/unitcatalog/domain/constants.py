from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the catalog registry, placeholder imagery and versioning
shared by the engine, the loader and the CLI.
"""

from typing import Dict, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_CATALOG = "ua"

# Image shown for compact-mode matches that carry no imagery of their own
UNKNOWN_IMAGE_PATH = "images/unknown.jpg"

# Prefix of the in-page identifiers assigned to root units
ANCHOR_PREFIX = "cat-"

# catalog key -> (page title, data file)
CATALOGS: Dict[str, Tuple[str, str]] = {
    "ua": ("Ukrainian Units", "ua.json"),
    "ru": ("Russian Units", "ru.json"),
}


def catalog_title(catalog: str) -> str:
    """Return the display title of a catalog, or an empty string if unknown."""
    return CATALOGS.get(catalog, ("", ""))[0]


def catalog_data_file(catalog: str) -> str:
    """Return the data file name of a catalog, or an empty string if unknown."""
    return CATALOGS.get(catalog, ("", ""))[1]

from __future__ import annotations

"""
Catalog Data Source.

Reads unit catalog documents from a local JSON file or an HTTP(S) location.
The loader only guarantees the top-level shape (a JSON array of units); the
contents are handed to the engine as-is.
"""

import json
import logging
from typing import Any

import requests

from unitcatalog import __version__
from unitcatalog.domain.constants import catalog_data_file
from unitcatalog.domain.unit_models import CatalogLoadError, UnitTree
from unitcatalog.infra.fs import is_remote_location, join_location

logger = logging.getLogger(__name__)

USER_AGENT = f"UnitCatalog-Client/{__version__}"
DEFAULT_TIMEOUT = 10

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_catalog_source(catalog: str, data_dir: str) -> str:
    """
    Build the location of a registered catalog's data file.

    Args:
        catalog: Registry key (e.g. 'ua').
        data_dir: Local directory or base URL holding the data files.

    Returns:
        str: Full path or URL of the data file.

    Raises:
        CatalogLoadError: If the catalog key is not registered.
    """
    data_file = catalog_data_file(catalog)
    if not data_file:
        raise CatalogLoadError(catalog, "unknown catalog")
    return join_location(data_dir, data_file)


def load_unit_tree(source: str, timeout: int = DEFAULT_TIMEOUT) -> UnitTree:
    """
    Load and parse a catalog document.

    Args:
        source: Local file path or http(s) URL.
        timeout: Request timeout in seconds for remote sources.

    Returns:
        UnitTree: The parsed list of root units.

    Raises:
        CatalogLoadError: If the source cannot be read, parsed, or is not a list.
    """
    if is_remote_location(source):
        data = _fetch_remote(source, timeout)
    else:
        data = _read_local(source)

    if not isinstance(data, list):
        raise CatalogLoadError(source, f"expected a JSON array, received {type(data).__name__}")

    logger.info(f"Catalog loaded from {source} ({len(data)} root units).")
    return data

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _read_local(path: str) -> Any:
    logger.debug(f"Reading catalog file: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise CatalogLoadError(path, str(e)) from e
    except UnicodeDecodeError as e:
        raise CatalogLoadError(path, f"not valid UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(path, f"malformed JSON ({e})") from e


def _fetch_remote(url: str, timeout: int) -> Any:
    headers = {"User-Agent": USER_AGENT}
    logger.debug(f"Fetching catalog from: {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise CatalogLoadError(url, f"timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        raise CatalogLoadError(url, str(e)) from e

    # requests' JSONDecodeError is both a RequestException and a ValueError
    try:
        data = response.json()
    except ValueError as e:
        raise CatalogLoadError(url, f"malformed JSON ({e})") from e

    size_kb = len(response.content) / 1024
    logger.debug(f"Network: catalog document received ({size_kb:.1f} KB).")
    return data

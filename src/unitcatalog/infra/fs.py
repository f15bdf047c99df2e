from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user application directory and normalizes the paths and
locations handed to the catalog loader.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "UnitCatalog"
UNIX_APP_DIR_NAME = ".unitcatalog"

_REMOTE_SCHEMES = ("http://", "https://")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/UnitCatalog
    - Linux/Mac: ~/.unitcatalog

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def is_remote_location(location: str) -> bool:
    """Return True if the location is an HTTP(S) URL rather than a local path."""
    return location.strip().lower().startswith(_REMOTE_SCHEMES)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and the user home shortcut. Remote
    locations are returned untouched.

    Args:
        path: Raw input path string.
        fallback: Default path used when the input is empty.

    Returns:
        str: Normalized absolute path, or the URL as given.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    if is_remote_location(p):
        return p
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def join_location(base: str, name: str) -> str:
    """Join a file name onto a local directory or a base URL."""
    if is_remote_location(base):
        return base.rstrip("/") + "/" + name
    return os.path.join(base, name)

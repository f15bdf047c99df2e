from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration dictionaries coming from config.json or the CLI
before a catalog is loaded. Handles type coercion, path normalization and
default injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from unitcatalog.domain.config import get_default_config
from unitcatalog.domain.constants import CATALOGS
from unitcatalog.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("catalog", "data_dir", "source"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["compact_mode"] = _as_bool(
        merged.get("compact_mode"), defaults["compact_mode"], "compact_mode", warnings, strict
    )
    merged["request_timeout"] = _as_positive_int(
        merged.get("request_timeout"), defaults["request_timeout"], "request_timeout", warnings, strict
    )

    # Domain-specific normalization
    merged["catalog"] = merged["catalog"].lower()
    merged["data_dir"] = normalize_path(merged["data_dir"], defaults["data_dir"])

    if merged["catalog"] not in CATALOGS and not merged["source"]:
        msg = f"Unknown catalog '{merged['catalog']}' and no explicit source given."
        if strict:
            raise ValueError(msg)
        warnings.append(msg)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept positive integers, coercing numeric strings outside strict mode."""
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value

    if not strict and isinstance(value, str) and value.strip().isdigit() and int(value) > 0:
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return int(value)

    msg = f"Invalid field '{field}': expected positive int, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback

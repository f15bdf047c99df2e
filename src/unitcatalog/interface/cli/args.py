from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed namespaces into
configuration overrides. The query itself is not a configuration value
and is read directly from the namespace by the application controller.
"""

import argparse
from typing import Any, Dict

from unitcatalog.domain.constants import CATALOGS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the unitcatalog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="unitcatalog",
        description="Browse a hierarchical unit catalog and filter it with a free-text query.",
    )

    # --- Data Source ---
    p.add_argument(
        "-c", "--catalog",
        dest="catalog",
        default=None,
        help=f"Registered catalog to open ({', '.join(sorted(CATALOGS))}).",
    )
    p.add_argument(
        "-s", "--source",
        dest="source",
        default=None,
        help="Explicit JSON file or http(s) URL; overrides --catalog.",
    )
    p.add_argument(
        "-d", "--data-dir",
        dest="data_dir",
        default=None,
        help="Directory or base URL holding the catalog data files.",
    )
    p.add_argument(
        "--timeout",
        dest="request_timeout",
        type=int,
        default=None,
        help="Timeout in seconds for remote catalogs.",
    )

    # --- Query ---
    p.add_argument(
        "-q", "--query",
        dest="query",
        default="",
        help="Space-separated search terms; every term must be found.",
    )

    # --- Display ---
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--compact",
        dest="compact",
        action="store_true",
        help="Show one line per unit with its thumbnail (default).",
    )
    mode.add_argument(
        "--details",
        action="store_true",
        help="Show images and descriptions instead of the compact view.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the filtered tree as JSON.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for later runs.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["catalog"] = args.catalog
    overrides["source"] = args.source
    overrides["data_dir"] = args.data_dir
    overrides["request_timeout"] = args.request_timeout

    if args.compact:
        overrides["compact_mode"] = True
    elif args.details:
        overrides["compact_mode"] = False

    return overrides

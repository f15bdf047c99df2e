from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults, saved state and CLI overrides), catalog loading, a single
filtering pass and rendering of the result.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from unitcatalog.core.analysis.unit_renderer import build_jump_index, render_unit_tree
from unitcatalog.core.services.catalog_session import CatalogSession
from unitcatalog.core.services.validator import validate_config
from unitcatalog.domain.config import get_default_config, load_config, save_config
from unitcatalog.domain.unit_models import CatalogLoadError
from unitcatalog.infra.catalog_source import load_unit_tree, resolve_catalog_source
from unitcatalog.infra.logging import LoggingConfig, configure_logging, get_logger
from unitcatalog.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_SOURCE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    try:
        source = clean_conf["source"] or resolve_catalog_source(
            clean_conf["catalog"], clean_conf["data_dir"]
        )
        units = load_unit_tree(source, timeout=clean_conf["request_timeout"])

        session = CatalogSession(
            units,
            catalog=clean_conf["catalog"],
            compact_mode=clean_conf["compact_mode"],
        )
        session.set_query(args.query)
        result = session.view()
    except CatalogLoadError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_SOURCE
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.json_output:
        payload = {
            "title": session.title,
            "search_mode": result.search_mode,
            "tokens": list(result.tokens),
            "jump_index": [asdict(a) for a in build_jump_index(result.units)],
            "units": result.units,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human_view(session, result.units, result.search_mode)

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for known keys into the base config."""
    out = dict(base)
    for k in ("catalog", "source", "data_dir", "request_timeout", "compact_mode"):
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_view(session: CatalogSession, units: List[Dict[str, Any]], search_mode: bool) -> None:
    if session.title:
        print(session.title)

    if search_mode:
        print(f"Filter: {' '.join(session.tokens)} ({len(units)} of {session.root_count} groups)")

    if not units:
        print("No matching units.")
        return

    lines: List[str] = []
    render_unit_tree(units, lines, compact=session.compact_mode, search_mode=search_mode)
    print("\n".join(lines))


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Query and output flags stay out of the overrides.
"""

import pytest

from unitcatalog.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_source_arguments_are_mapped():
    args = parse_args(["-c", "ru", "-s", "units.json", "-d", "/data", "--timeout", "5"])
    overrides = args_to_overrides(args)

    assert overrides["catalog"] == "ru"
    assert overrides["source"] == "units.json"
    assert overrides["data_dir"] == "/data"
    assert overrides["request_timeout"] == 5


def test_details_flag_disables_compact_mode():
    overrides = args_to_overrides(parse_args(["--details"]))
    assert overrides["compact_mode"] is False


def test_defaults_are_explicit_in_overrides():
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert overrides["catalog"] is None
    assert "compact_mode" not in overrides
    assert args.query == ""
    assert args.json_output is False


def test_query_is_read_verbatim():
    args = parse_args(["-q", "Bravo  Company"])
    assert args.query == "Bravo  Company"
    assert "query" not in args_to_overrides(args)


def test_compact_flag_enables_compact_mode():
    overrides = args_to_overrides(parse_args(["--compact"]))
    assert overrides["compact_mode"] is True


def test_compact_and_details_are_mutually_exclusive():
    with pytest.raises(SystemExit):
        parse_args(["--compact", "--details"])


def test_log_file_argument_is_captured():
    args = parse_args(["--log-file", "/tmp/unitcatalog.log"])
    assert args.log_file == "/tmp/unitcatalog.log"
    assert "log_file" not in args_to_overrides(args)

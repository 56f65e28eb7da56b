from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Unset flags do not produce overrides.
"""

import pytest

from folder_tree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_flags_mapping():
    args = parse_args(["--indent", "2", "--style", "ascii", "--with-photo", "--debug"])

    overrides = args_to_overrides(args)

    assert overrides == {
        "indent_width": 2,
        "style": "ascii",
        "include_photo": True,
        "log_level": "DEBUG",
    }


def test_cli_defaults_produce_no_overrides():
    args = parse_args([])

    assert args_to_overrides(args) == {}
    assert args.json_output is False
    assert args.dump_config is False
    assert args.tree_json is None


def test_cli_rejects_unknown_style():
    with pytest.raises(SystemExit):
        parse_args(["--style", "fancy"])

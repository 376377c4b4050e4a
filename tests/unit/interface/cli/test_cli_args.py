from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV string parsing logic.
3. Unset options map to None so saved configuration wins.
"""

import pytest

from noteindex.interface.cli.args import args_to_overrides, build_parser
from noteindex.interface.cli.app import _merge_config


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_path_and_filter_mapping():
    args = parse_args(["notes", "-o", "index.md", "-e", ".txt", "--title", "Journal"])

    overrides = args_to_overrides(args)

    assert overrides["root_path"] == "notes"
    assert overrides["output_path"] == "index.md"
    assert overrides["suffix"] == ".txt"
    assert overrides["title"] == "Journal"


def test_cli_long_option_names():
    args = parse_args(["notes", "--out", "x.md", "--ext", ".rst"])

    assert args.output_path == "x.md"
    assert args.suffix == ".rst"


def test_cli_csv_ignore_parsing():
    args = parse_args(["notes", "--ignore", "build, dist,,"])

    assert args_to_overrides(args)["ignore_dirs"] == ["build", "dist"]


def test_cli_defaults_are_none_in_overrides():
    overrides = args_to_overrides(parse_args(["notes"]))

    assert overrides["output_path"] is None
    assert overrides["suffix"] is None
    assert overrides["ignore_dirs"] is None


def test_cli_runtime_flags():
    args = parse_args(["notes", "--dry-run", "--print", "--json", "--debug", "--use-defaults", "--save-config"])

    assert args.dry_run is True
    assert args.print_index is True
    assert args.json_output is True
    assert args.debug is True
    assert args.use_defaults is True
    assert args.save_config is True


def test_cli_requires_root(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args([])

    assert exc_info.value.code == 2
    assert "ROOT" in capsys.readouterr().err


def test_merge_keeps_base_for_unset_options():
    base = {"root_path": "/old", "output_path": "INDEX.md", "suffix": ".md"}
    overrides = {"root_path": "/new", "output_path": None, "suffix": None, "bogus": 1}

    merged = _merge_config(base, overrides)

    assert merged == {"root_path": "/new", "output_path": "INDEX.md", "suffix": ".md"}

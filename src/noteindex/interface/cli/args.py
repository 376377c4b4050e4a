from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from noteindex import __version__
from noteindex.domain.config import DEFAULT_OUTPUT_FILE, DEFAULT_SUFFIX, DEFAULT_TITLE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the NoteIndex CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="noteindex",
        description="Build a markdown index of the notes found in a directory tree.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # --- Path Management ---
    p.add_argument(
        "root_path",
        metavar="ROOT",
        help="Directory to scan for notes.",
    )
    p.add_argument(
        "-o", "--out",
        dest="output_path",
        default=None,
        help=f"Path to the output file (default: {DEFAULT_OUTPUT_FILE}).",
    )

    # --- Selection ---
    p.add_argument(
        "-e", "--ext",
        dest="suffix",
        default=None,
        help=f"Index files that have this extension (default: {DEFAULT_SUFFIX}).",
    )
    p.add_argument(
        "--ignore",
        dest="ignore_dirs",
        default=None,
        help="Comma-separated directory names to skip, in addition to hidden ones.",
    )

    # --- Rendering ---
    p.add_argument(
        "--title",
        default=None,
        help=f"Title of the generated document (default: {DEFAULT_TITLE}).",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and render the index without writing the output file.",
    )
    p.add_argument(
        "--print",
        dest="print_index",
        action="store_true",
        help="Print the rendered index to stdout.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Load settings from this JSON file instead of the user config.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any saved configuration and start from built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration (to --config FILE if given) before running.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset options map to None so the merge keeps the base value.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    return {
        "root_path": args.root_path,
        "output_path": args.output_path,
        "suffix": args.suffix,
        "title": args.title,
        "ignore_dirs": _split_csv(args.ignore_dirs),
    }

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]

from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, loading and merging of
configuration sources (defaults, saved config, CLI overrides), the indexing
run, and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from noteindex.core.pipeline.engine import run_indexer
from noteindex.core.pipeline.validator import validate_config
from noteindex.domain.config import get_default_config, load_config, save_config
from noteindex.domain.pipeline_models import IndexResult
from noteindex.infra.fs import normalize_path
from noteindex.infra.logging import LoggingConfig, configure_logging, get_logger
from noteindex.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 indexing failure, 2 bad input,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Base configuration (defaults vs saved state)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config and not save_config(clean_conf, args.config_file):
        print("WARNING: configuration could not be saved.", file=sys.stderr)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Pre-flight input verification
    root_path = normalize_path(clean_conf["root_path"], os.getcwd())
    if not os.path.isdir(root_path):
        msg = f"Root directory does not exist: {root_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 6. Indexing run
    try:
        result = run_indexer(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Indexing interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif args.print_index and result.ok:
        sys.stdout.write(result.text)
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.

    Only known keys are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: IndexResult) -> None:
    """Print the run result as a short terminal report."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Indexed {result.note_count} notes in {result.topic_count} topics.")

    if result.dry_run:
        print("DRY RUN: index not written.")
        print(f"Target path: {result.output_path}")
        return

    if result.written:
        print(f"Index written to: {result.output_path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())

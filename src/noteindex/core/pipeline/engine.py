from __future__ import annotations

"""
Core indexing pipeline.

This module coordinates one indexing run:
1. Validates configuration and paths.
2. Resolves the identity of the output file so it never indexes itself.
3. Builds the note tree (fail-fast on listing errors).
4. Renders the markdown document.
5. Writes the document, only after 3 and 4 fully succeeded.
"""

import logging
import os
from typing import Any, Dict, Optional

from noteindex.core.analysis.tree_builder import build_tree
from noteindex.core.analysis.tree_renderer import render_index
from noteindex.core.pipeline.validator import validate_config
from noteindex.domain.errors import IndexWriteError, TreeBuildError
from noteindex.domain.pipeline_models import (
    IndexResult,
    create_error_result,
    create_success_result,
)
from noteindex.infra.fs import ExclusionTarget, normalize_path, write_text_file

logger = logging.getLogger(__name__)


def run_indexer(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> IndexResult:
    """
    Execute a full indexing run.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, build and render without writing to disk.

    Returns:
        IndexResult: Object containing status, counts and the rendered text.
    """
    logger.info("Indexing run started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    root_path = normalize_path(cfg["root_path"], cwd)
    output_path = normalize_path(cfg["output_path"], cwd)

    if not os.path.isdir(root_path):
        msg = f"Invalid root directory: {root_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, root_path, output_path)

    # -------------------------------------------------------------------------
    # 2) Exclusion Target
    # -------------------------------------------------------------------------
    exclude_target = ExclusionTarget(output_path)

    # -------------------------------------------------------------------------
    # 3) Build
    # -------------------------------------------------------------------------
    try:
        tree = build_tree(
            root_path,
            cfg["suffix"],
            exclude_target,
            ignore_dirs=cfg["ignore_dirs"],
            hidden_prefix=cfg["hidden_prefix"],
        )
    except TreeBuildError as e:
        msg = f"Indexing aborted: {e}"
        logger.error(msg)
        return create_error_result(
            msg, cfg, root_path, output_path,
            summary_extra={"failed_path": e.path},
        )

    # -------------------------------------------------------------------------
    # 4) Render
    # -------------------------------------------------------------------------
    text = render_index(tree, cfg["suffix"], title=cfg["title"])
    note_count = tree.count_notes()
    topic_count = tree.count_topics()
    logger.info(f"Indexed {note_count} notes across {topic_count} topics.")

    # -------------------------------------------------------------------------
    # 5) Persist
    # -------------------------------------------------------------------------
    written = False
    if dry_run:
        logger.info("Dry run: Skipping write of the index file.")
    else:
        try:
            write_text_file(output_path, text)
        except IndexWriteError as e:
            logger.error(str(e))
            return create_error_result(str(e), cfg, root_path, output_path)
        written = True

    summary = {
        "lines": text.count("\n"),
        "ignore_dirs": list(cfg["ignore_dirs"]),
        "output_excluded": exclude_target.exists,
        "warnings": list(warnings),
    }

    logger.info("Indexing run completed successfully.")
    return create_success_result(
        cfg, root_path, output_path,
        text=text,
        note_count=note_count,
        topic_count=topic_count,
        written=written,
        dry_run=dry_run,
        summary_extra=summary,
    )

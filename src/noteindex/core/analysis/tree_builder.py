from __future__ import annotations

"""
Note Tree Builder.

Scans a directory recursively and aggregates matching files into the Entry
model: one Entry per directory, one Note per file ending with the configured
suffix. Hidden and ignored directories are pruned, and the index's own output
file is never listed.
"""

import logging
import os
from datetime import datetime
from typing import Iterable, Optional

from noteindex.domain.errors import TreeBuildError
from noteindex.domain.tree_models import Entry, Note
from noteindex.infra.fs import ExclusionTarget

logger = logging.getLogger(__name__)

DEFAULT_HIDDEN_PREFIX = "."

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        root_path: str,
        suffix: str,
        exclude_target: Optional[ExclusionTarget] = None,
        ignore_dirs: Optional[Iterable[str]] = None,
        hidden_prefix: str = DEFAULT_HIDDEN_PREFIX,
) -> Entry:
    """
    Build the full note tree rooted at a directory.

    The scan is fail-fast: the first directory that cannot be listed aborts
    the whole build and no partial tree is returned.

    Args:
        root_path: Directory to scan.
        suffix: Filename suffix a file needs to become a Note (e.g. '.md').
        exclude_target: Identity of the output file to leave out.
        ignore_dirs: Directory names skipped in addition to hidden ones.
        hidden_prefix: Name prefix marking hidden directories.

    Returns:
        Entry: Root entry of the populated tree.

    Raises:
        TreeBuildError: If any directory in the tree cannot be listed.
    """
    logger.info(f"Scanning notes under: {root_path}")

    root = Entry()
    _traverse(
        root_path,
        root,
        suffix=suffix,
        exclude_target=exclude_target or ExclusionTarget(None),
        ignore_dirs=frozenset(ignore_dirs or ()),
        hidden_prefix=hidden_prefix,
    )

    logger.debug(f"Scan complete: {root.count_notes()} notes in {root.count_topics()} topics.")
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _traverse(
        dir_path: str,
        entry: Entry,
        *,
        suffix: str,
        exclude_target: ExclusionTarget,
        ignore_dirs: frozenset,
        hidden_prefix: str,
) -> None:
    """Populate an entry from one directory listing, recursing into subdirectories."""
    logger.debug(f"Listing directory: {dir_path}")

    try:
        with os.scandir(dir_path) as it:
            children = list(it)
    except OSError as e:
        logger.error(f"Directory listing failed for '{dir_path}': {e}")
        raise TreeBuildError(dir_path, e) from e

    for child in children:
        name = child.name

        try:
            is_dir = child.is_dir()
            is_file = not is_dir and child.is_file()
        except OSError as e:
            raise TreeBuildError(child.path, e) from e

        if is_dir:
            if _is_skipped_dir(name, ignore_dirs, hidden_prefix):
                logger.debug(f"Skipping directory: {child.path}")
                continue
            _traverse(
                child.path,
                entry.child(name),
                suffix=suffix,
                exclude_target=exclude_target,
                ignore_dirs=ignore_dirs,
                hidden_prefix=hidden_prefix,
            )
            continue

        if not is_file or not name.endswith(suffix):
            continue

        if exclude_target.matches(child.path):
            logger.debug(f"Excluding output file from index: {child.path}")
            continue

        try:
            mtime = child.stat().st_mtime
        except OSError as e:
            raise TreeBuildError(child.path, e) from e

        entry.notes.append(Note(name=name, timestamp=datetime.fromtimestamp(mtime)))


def _is_skipped_dir(name: str, ignore_dirs: frozenset, hidden_prefix: str) -> bool:
    """Hidden directories and explicitly ignored names are never traversed."""
    if hidden_prefix and name.startswith(hidden_prefix):
        return True
    return name in ignore_dirs

from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path normalization, user data directory resolution,
file identity comparison and the final index write. Acts as the only place
where the indexer touches the filesystem outside the directory scan.
"""

import logging
import os
from typing import Optional

from noteindex.domain.errors import IndexWriteError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "NoteIndex"
UNIX_APP_DIR_NAME = ".noteindex"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/NoteIndex
    - Linux/Mac: ~/.noteindex

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILE IDENTITY
# -----------------------------------------------------------------------------

class ExclusionTarget:
    """
    Identity of the file the indexer must never list (its own output).

    The target is stat'ed once, before the scan. Candidates are compared by
    device and inode, so symlinks, relative paths and trailing separators all
    resolve to the same file. Platforms that report no inode fall back to
    comparing canonical path strings, which misses hard links.
    """

    def __init__(self, path: Optional[str]):
        self.path = path
        self._stat: Optional[os.stat_result] = None
        self._real_path: Optional[str] = None

        if not path:
            return
        try:
            self._stat = os.stat(path)
        except OSError:
            # Nothing on disk yet, so nothing in the tree can be the output
            logger.debug(f"Output file '{path}' does not exist yet; no exclusion applied.")
            return
        self._real_path = _canonical(path)

    @property
    def exists(self) -> bool:
        return self._stat is not None

    def matches(self, candidate_path: str) -> bool:
        """
        Check whether a path refers to the same filesystem entity as the target.

        Args:
            candidate_path: Path of a file discovered during the scan.

        Returns:
            bool: True if the candidate is the excluded output file.
        """
        if self._stat is None:
            return False

        if self._stat.st_ino:
            try:
                return os.path.samestat(self._stat, os.stat(candidate_path))
            except OSError:
                return False

        return _canonical(candidate_path) == self._real_path


def _canonical(path: str) -> str:
    return os.path.normcase(os.path.realpath(os.path.abspath(path)))

# -----------------------------------------------------------------------------
# OUTPUT PERSISTENCE
# -----------------------------------------------------------------------------

def write_text_file(path: str, text: str) -> None:
    """
    Persist UTF-8 text to a path, replacing any previous content.

    Parent directories are created on demand.

    Args:
        path: Destination file path.
        text: Full document content.

    Raises:
        IndexWriteError: If the directory or file cannot be written.
    """
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise IndexWriteError(path, e) from e
    logger.info(f"Index saved to file: {path}")

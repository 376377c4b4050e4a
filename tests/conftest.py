from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for note trees and configuration dictionaries.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# Reference instants; rendered as '02 Jan 2006' and '15 Mar 2021'
T1 = datetime(2006, 1, 2, 15, 4, 5)
T2 = datetime(2021, 3, 15, 9, 30, 0)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def ref_times() -> Tuple[datetime, datetime]:
    """Modification times pinned on the notes_tree files (T1, T2)."""
    return T1, T2


@pytest.fixture
def write_note() -> Callable[..., Path]:
    """
    Return a helper that creates a file and pins its modification time.

    Returns:
        Callable: write_note(path, mtime=T1, content="") -> Path
    """
    def _write(path: Path, mtime: datetime = T1, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content or f"# {path.stem}\n", encoding="utf-8")
        ts = mtime.timestamp()
        os.utime(path, (ts, ts))
        return path

    return _write


@pytest.fixture
def notes_tree(tmp_path: Path, write_note: Callable[..., Path]) -> Path:
    """
    Creates a temporary notes directory.

    Structure:
    /notes
      a.md            (T1)
      zeta.md         (T1)
      todo.txt
      README.md       (would-be output file)
      /topics
        b.md          (T2)
        /deep
          c.md        (T2)
      /archive
        README.md     (T1)
      /.git
        hidden.md
      /node_modules
        pkg.md
    """
    root = tmp_path / "notes"
    root.mkdir()

    write_note(root / "a.md", T1)
    write_note(root / "zeta.md", T1)
    write_note(root / "todo.txt", T1)
    write_note(root / "README.md", T1)

    write_note(root / "topics" / "b.md", T2)
    write_note(root / "topics" / "deep" / "c.md", T2)
    write_note(root / "archive" / "README.md", T1)

    write_note(root / ".git" / "hidden.md", T1)
    write_note(root / "node_modules" / "pkg.md", T1)

    return root


@pytest.fixture
def mock_config_dict(notes_tree: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'noteindex.domain.config', pointing at
    the notes_tree fixture and writing to its root README.md.
    """
    return {
        "root_path": str(notes_tree),
        "output_path": str(notes_tree / "README.md"),
        "suffix": ".md",
        "title": "Notes",
        "ignore_dirs": [".git", "node_modules", "__pycache__"],
        "hidden_prefix": ".",
    }

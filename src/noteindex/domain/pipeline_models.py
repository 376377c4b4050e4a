from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object used to communicate the outcome of an indexing
run between the pipeline engine and the CLI, plus its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexResult:
    """
    Unified result of a complete indexing run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Normalized root directory scanned.
        output_path: Normalized destination of the index file.
        suffix: Suffix filter applied during the scan.
        note_count: Number of notes in the rendered index.
        topic_count: Number of topics (directories) in the rendered index.
        written: Whether the output file was (re)written.
        dry_run: Whether writing was skipped on purpose.
        text: Rendered document (empty on failure).
        summary: Additional execution metadata.
    """
    ok: bool
    error: str

    root_path: str
    output_path: str
    suffix: str

    note_count: int = 0
    topic_count: int = 0
    written: bool = False
    dry_run: bool = False

    text: str = ""
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        root_path: str,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> IndexResult:
    """
    Create a failed indexing result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        root_path: The target input directory.
        output_path: Calculated destination path.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        IndexResult: An immutable error result object.
    """
    return IndexResult(
        ok=False,
        error=error,
        root_path=root_path,
        output_path=output_path,
        suffix=cfg.get("suffix", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        root_path: str,
        output_path: str,
        *,
        text: str,
        note_count: int,
        topic_count: int,
        written: bool,
        dry_run: bool,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> IndexResult:
    """
    Create a successful indexing result.

    Returns:
        IndexResult: An immutable success result object.
    """
    return IndexResult(
        ok=True,
        error="",
        root_path=root_path,
        output_path=output_path,
        suffix=cfg.get("suffix", ""),
        note_count=note_count,
        topic_count=topic_count,
        written=written,
        dry_run=dry_run,
        text=text,
        summary=summary_extra or {},
    )

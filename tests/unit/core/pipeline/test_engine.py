from __future__ import annotations

"""
Unit tests for the Indexing Pipeline Engine.

Verifies the build-render-write sequence, dry runs, self-exclusion of the
output file, and that failures never touch the previous output.
"""

import os
from pathlib import Path
from unittest.mock import patch

from noteindex.core.analysis import tree_builder
from noteindex.core.pipeline.engine import run_indexer


def test_run_writes_expected_document(mock_config_dict, notes_tree: Path) -> None:
    result = run_indexer(mock_config_dict)

    assert result.ok is True
    assert result.written is True
    assert result.error == ""

    expected = (
        "# Notes\n"
        "  - [a](a.md) [02 Jan 2006]\n"
        "  - [zeta](zeta.md) [02 Jan 2006]\n"
        "\n"
        "  ## archive\n"
        "   - [README](archive/README.md) [02 Jan 2006]\n"
        "\n"
        "  ## topics\n"
        "   - [b](topics/b.md) [15 Mar 2021]\n"
        "\n"
        "   ### deep\n"
        "    - [c](topics/deep/c.md) [15 Mar 2021]\n"
    )
    assert result.text == expected
    assert (notes_tree / "README.md").read_text(encoding="utf-8") == expected


def test_result_counts_and_summary(mock_config_dict) -> None:
    result = run_indexer(mock_config_dict)

    assert result.note_count == 5
    assert result.topic_count == 3
    assert result.summary["output_excluded"] is True
    assert result.summary["lines"] == result.text.count("\n")


def test_second_run_is_stable(mock_config_dict, notes_tree: Path) -> None:
    """Re-running over the produced README.md must not index it."""
    first = run_indexer(mock_config_dict).text
    second = run_indexer(mock_config_dict).text

    assert first == second
    assert "[README](README.md)" not in second


def test_output_outside_root_is_created(mock_config_dict, tmp_path: Path, notes_tree: Path) -> None:
    out = tmp_path / "site" / "index.md"
    mock_config_dict["output_path"] = str(out)

    result = run_indexer(mock_config_dict)

    assert result.ok
    assert out.exists()
    # Root README.md is an ordinary note when it is not the output
    assert "  - [README](README.md) [02 Jan 2006]" in result.text


def test_dry_run_does_not_write(mock_config_dict, notes_tree: Path) -> None:
    readme = notes_tree / "README.md"
    before = readme.read_text(encoding="utf-8")

    result = run_indexer(mock_config_dict, dry_run=True)

    assert result.ok
    assert result.dry_run is True
    assert result.written is False
    assert result.text.startswith("# Notes\n")
    assert readme.read_text(encoding="utf-8") == before


def test_invalid_root_returns_error(mock_config_dict, tmp_path: Path) -> None:
    mock_config_dict["root_path"] = str(tmp_path / "missing")

    result = run_indexer(mock_config_dict)

    assert result.ok is False
    assert "Invalid root directory" in result.error
    assert result.text == ""


def test_listing_failure_leaves_output_untouched(mock_config_dict, notes_tree: Path) -> None:
    readme = notes_tree / "README.md"
    readme.write_text("previous index\n", encoding="utf-8")
    real_scandir = os.scandir

    def flaky_scandir(path):
        if os.path.basename(os.path.normpath(path)) == "deep":
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    with patch.object(tree_builder.os, "scandir", side_effect=flaky_scandir):
        result = run_indexer(mock_config_dict)

    assert result.ok is False
    assert "Indexing aborted" in result.error
    assert result.summary["failed_path"].endswith("deep")
    assert readme.read_text(encoding="utf-8") == "previous index\n"


def test_write_failure_is_reported(mock_config_dict) -> None:
    with patch("noteindex.infra.fs.open", side_effect=PermissionError(13, "Permission denied"), create=True):
        result = run_indexer(mock_config_dict)

    assert result.ok is False
    assert "Cannot write index" in result.error
    assert result.written is False


def test_compound_suffix_selects_and_strips(tmp_path: Path, write_note) -> None:
    root = tmp_path / "drafts"
    write_note(root / "idea-draft.md")
    write_note(root / "final.md")

    result = run_indexer(
        {"root_path": str(root), "output_path": str(tmp_path / "OUT.md"), "suffix": "-draft.md"},
        dry_run=True,
    )

    assert result.ok
    assert result.suffix == "-draft.md"
    assert result.text == "# Notes\n  - [idea](idea-draft.md) [02 Jan 2006]\n"
    assert result.summary["warnings"] == []


def test_custom_suffix_and_title(mock_config_dict, notes_tree: Path, tmp_path: Path) -> None:
    mock_config_dict.update(
        suffix="txt",
        title="Tasks",
        output_path=str(tmp_path / "tasks.md"),
    )

    result = run_indexer(mock_config_dict)

    assert result.ok
    assert result.suffix == ".txt"
    assert result.text.startswith("# Tasks\n  - [todo](todo.txt) [02 Jan 2006]\n")
    assert "warnings" in result.summary and result.summary["warnings"]

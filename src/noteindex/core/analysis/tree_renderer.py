from __future__ import annotations

"""
Note Tree Renderer.

Converts the Entry model into the markdown index document. Each recursion
level returns its own lines and the caller concatenates them, so rendering
is pure and repeatable.
"""

from datetime import datetime
from typing import List

from noteindex.domain.tree_models import Entry

DEFAULT_TITLE = "Notes"
START_DEPTH = 2
HEADING_MARKER = "#"

# Fixed English abbreviations; strftime('%b') would follow the process locale
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_index(tree: Entry, suffix: str, title: str = DEFAULT_TITLE) -> str:
    """
    Render a note tree as a markdown document.

    The root's notes form an un-headed list right under the title; each
    sub-topic becomes a heading whose level grows with its depth.

    Args:
        tree: Root entry produced by the tree builder.
        suffix: Suffix used when building, stripped from display names.
        title: Text of the top-level heading.

    Returns:
        str: The complete document, newline terminated.
    """
    lines = [f"# {title}"]
    lines.extend(_emit(tree, "", START_DEPTH, suffix))
    return "\n".join(lines) + "\n"


def format_timestamp(timestamp: datetime) -> str:
    """Format a modification time as 'DD Mon YYYY' (e.g. '02 Jan 2006')."""
    return f"{timestamp.day:02d} {_MONTHS[timestamp.month - 1]} {timestamp.year:04d}"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _emit(entry: Entry, path_prefix: str, depth: int, suffix: str) -> List[str]:
    """Return the lines for one entry: its notes, then each sub-topic section."""
    indent = " " * depth
    lines: List[str] = []

    for note in sorted(entry.notes, key=lambda n: n.name):
        display_name = note.name[:len(note.name) - len(suffix)] if suffix else note.name
        link = _join(path_prefix, note.name)
        lines.append(f"{indent}- [{display_name}]({link}) [{format_timestamp(note.timestamp)}]")

    for topic in sorted(entry.sub_topics):
        lines.append("")
        lines.append(f"{indent}{HEADING_MARKER * depth} {topic}")
        lines.extend(_emit(entry.sub_topics[topic], _join(path_prefix, topic), depth + 1, suffix))

    return lines


def _join(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name

from __future__ import annotations

"""
Note Tree Data Models.

Provides the recursive node types used by the indexing subsystem to mirror
a directory of notes as topics (directories) holding notes (matching files)
and nested sub-topics.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List

# Directory name used as a mapping key; compared and ordered as a raw string
Topic = str

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Note:
    """
    Represents a leaf entry (matched file) inside a topic.

    Attributes:
        name: Filename including the suffix, relative to its topic.
        timestamp: Last-modification time of the file.
    """
    name: str
    timestamp: datetime


@dataclass
class Entry:
    """
    One directory level of the note tree.

    Notes are kept in discovery order; the renderer sorts a copy on every
    pass. Each entry exclusively owns its sub-topics.

    Attributes:
        notes: Notes found directly in this directory.
        sub_topics: Child entries keyed by directory name.
    """
    notes: List[Note] = field(default_factory=list)
    sub_topics: Dict[Topic, "Entry"] = field(default_factory=dict)

    def child(self, topic: Topic) -> "Entry":
        """Return the sub-topic entry for a name, creating it on first use."""
        existing = self.sub_topics.get(topic)
        if existing is None:
            existing = Entry()
            self.sub_topics[topic] = existing
        return existing

    def count_notes(self) -> int:
        """Total number of notes in this entry and all its descendants."""
        return len(self.notes) + sum(e.count_notes() for e in self.sub_topics.values())

    def count_topics(self) -> int:
        """Total number of sub-topics below this entry."""
        return len(self.sub_topics) + sum(e.count_topics() for e in self.sub_topics.values())

    def is_empty(self) -> bool:
        return not self.notes and not self.sub_topics

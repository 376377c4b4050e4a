from __future__ import annotations

"""
Unit tests for the Note Tree Data Models.

Verifies immutability of notes, idempotent sub-topic insertion and the
recursive counters used in run summaries.
"""

import dataclasses
from datetime import datetime

import pytest

from noteindex.domain.tree_models import Entry, Note


def test_note_is_immutable() -> None:
    note = Note(name="a.md", timestamp=datetime(2006, 1, 2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.name = "b.md"  # type: ignore[misc]


def test_child_reuses_existing_entry() -> None:
    """Re-encountering a topic must return the same node, not overwrite it."""
    root = Entry()
    first = root.child("topics")
    first.notes.append(Note(name="b.md", timestamp=datetime(2021, 1, 1)))

    second = root.child("topics")

    assert second is first
    assert len(root.sub_topics) == 1
    assert second.notes[0].name == "b.md"


def test_entries_do_not_share_containers() -> None:
    a, b = Entry(), Entry()
    a.notes.append(Note(name="x.md", timestamp=datetime(2020, 1, 1)))
    a.child("t")

    assert b.notes == []
    assert b.sub_topics == {}


def test_recursive_counters() -> None:
    ts = datetime(2020, 5, 5)
    root = Entry(notes=[Note("a.md", ts)])
    topics = root.child("topics")
    topics.notes.append(Note("b.md", ts))
    deep = topics.child("deep")
    deep.notes.extend([Note("c.md", ts), Note("d.md", ts)])
    root.child("empty")

    assert root.count_notes() == 4
    assert root.count_topics() == 3
    assert root.child("empty").is_empty()
    assert not root.is_empty()

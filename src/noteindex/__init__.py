from __future__ import annotations

"""
NoteIndex.

Builds a single markdown index of the note files found in a directory tree,
grouped by topic (subdirectory) and sorted alphabetically at every level.
"""

__version__ = "1.0.0"

from __future__ import annotations

"""
Indexing Error Taxonomy.

Exceptions raised by the build and write phases. The pipeline engine turns
them into failed results; nothing below it retries or recovers.
"""


class NoteIndexError(Exception):
    """Base class for all indexing failures."""


class TreeBuildError(NoteIndexError):
    """
    A directory (or one of its entries) could not be read while building the note tree.

    Attributes:
        path: Directory or entry whose scan failed.
    """

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot scan '{path}': {cause.strerror or cause}")


class IndexWriteError(NoteIndexError):
    """The rendered index could not be persisted to the output path."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write index to '{path}': {cause.strerror or cause}")

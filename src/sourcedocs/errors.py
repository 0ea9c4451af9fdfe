"""Exceptions raised by sourcedocs."""

from __future__ import annotations


class SourceDocsError(Exception):
    """Base exception for sourcedocs operations."""

    pass


class MalformedDiscussionError(SourceDocsError):
    """Raised when discussion markup cannot be parsed into a tree."""

    def __init__(self, message: str, markup: str | None = None):
        super().__init__(message)
        self.markup = markup


class RecordError(SourceDocsError):
    """Raised when input does not contain documentation records."""

    pass

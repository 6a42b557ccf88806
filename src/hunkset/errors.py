"""Exceptions raised while parsing unified diffs.

Every malformation aborts the current parse call. Files already pushed
onto the PatchSet stay there; nothing is rolled back.
"""
from __future__ import annotations


class ParseError(Exception):
    """Base class for unified diff parse failures.

    Attributes:
        line: The offending line of diff text
        line_no: 1-based position of the line in the diff, if known
    """

    prefix = "Malformed diff"

    def __init__(self, line: str, line_no: int | None = None) -> None:
        self.line = line
        self.line_no = line_no
        super().__init__(f"{self.prefix}: {line}")


class TargetWithoutSourceError(ParseError):
    """A ``+++`` header arrived while a file was pending, or before any ``---``."""

    prefix = "Target without source"


class UnexpectedHunkError(ParseError):
    """A ``@@`` header arrived with no file pending."""

    prefix = "Unexpected hunk found"


class ExpectLineError(ParseError):
    """A line inside a hunk is not a valid hunk body line."""

    prefix = "Hunk line expected"

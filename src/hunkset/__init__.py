"""
hunkset - Unified diff parsing into a navigable model.

Parses the text produced by ``diff -u`` or ``git diff`` into files,
hunks and individually typed, numbered lines. The model only describes
a diff; it never applies one.

Example
-------
>>> from hunkset import PatchSet
>>>
>>> patch_set = PatchSet.from_string(diff_text)
>>> for patched_file in patch_set:
...     print(patched_file.path(), patched_file.added(), patched_file.removed())
>>>
>>> # Files in other encodings
>>> patch_set = PatchSet.from_encoding("latin-1")
>>> patch_set.parse_bytes(raw_bytes)
>>>
>>> # Without exceptions
>>> result = parse_patch_to_result(diff_text)
>>> if result:
...     print(result.data.summary())

Classes
-------
PatchSet
    A whole parsed diff: the ordered patched files.

PatchedFile
    One source/target file pair with its hunks.

Hunk
    A contiguous block of lines with declared start/length extents.

Line
    One hunk body line with source/target line numbers.

LineType
    Enum for line types (ADDED, REMOVED, CONTEXT, EMPTY).

PatchSetParser
    The parser behind PatchSet.parse.

ParseError
    Base of TargetWithoutSourceError, UnexpectedHunkError and
    ExpectLineError.
"""
from __future__ import annotations

from hunkset.errors import (
    ExpectLineError,
    ParseError,
    TargetWithoutSourceError,
    UnexpectedHunkError,
)
from hunkset.models import Hunk, Line, LineType, PatchedFile, PatchSet
from hunkset.parser import (
    PatchSetParser,
    build_hunk,
    parse_patch,
    parse_patch_to_result,
)
from hunkset.results import ErrorResult, Result

__version__ = "0.1.0"

__all__ = [
    # Models
    "PatchSet",
    "PatchedFile",
    "Hunk",
    "Line",
    "LineType",
    # Parser
    "PatchSetParser",
    "build_hunk",
    "parse_patch",
    "parse_patch_to_result",
    # Errors
    "ParseError",
    "TargetWithoutSourceError",
    "UnexpectedHunkError",
    "ExpectLineError",
    # Results
    "Result",
    "ErrorResult",
]

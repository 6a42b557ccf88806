"""Line classification for unified diff text.

Each category of diff line has its own matcher. A matcher looks at one
line and returns a small frozen record describing it, or ``None`` when
the line does not belong to that category:

- SourceHeader - ``--- <filename>[\\t<timestamp>]``
- TargetHeader - ``+++ <filename>[\\t<timestamp>]``
- HunkHeader - ``@@ -<start>[,<length>] +<start>[,<length>] @@[ <section>]``
- BodyLine - one line inside a hunk

Matchers are pure functions of their input line.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from hunkset.models import LineType

NO_NEWLINE_MARKER = "\\ No newline at end of file"

# Length captured when a hunk header omits ``,<length>``. Unified diff
# tooling reads a missing length as 1; this library has always read it
# as 0 and callers rely on that.
MISSING_LENGTH = "0"

_SOURCE_HEADER = re.compile(r"^--- (?P<filename>[^\t\n]+)(?:\t(?P<timestamp>[^\n]+))?")
_TARGET_HEADER = re.compile(r"^\+\+\+ (?P<filename>[^\t\n]+)(?:\t(?P<timestamp>[^\n]+))?")
_HUNK_HEADER = re.compile(
    r"^@@ -(?P<source_start>[0-9]+)(?:,(?P<source_length>[0-9]+))?"
    r" \+(?P<target_start>[0-9]+)(?:,(?P<target_length>[0-9]+))? @@"
    r" ?(?P<section_header>.*)"
)

_BODY_MARKERS = {
    "+": LineType.ADDED,
    "-": LineType.REMOVED,
    " ": LineType.CONTEXT,
}


@dataclass(frozen=True)
class SourceHeader:
    """A ``---`` file header."""

    filename: str
    timestamp: str | None = None


@dataclass(frozen=True)
class TargetHeader:
    """A ``+++`` file header."""

    filename: str
    timestamp: str | None = None


@dataclass(frozen=True)
class HunkHeader:
    """A ``@@`` hunk header with its numeric fields still as captured text.

    Attributes:
        source_start: Declared first line in the source file
        source_length: Declared source line count ("0" when omitted)
        target_start: Declared first line in the target file
        target_length: Declared target line count ("0" when omitted)
        section_header: Trailing text after the closing ``@@``
    """

    source_start: str
    source_length: str
    target_start: str
    target_length: str
    section_header: str = ""


@dataclass(frozen=True)
class BodyLine:
    """A hunk body line split into its type and value."""

    line_type: LineType
    value: str


Classified = SourceHeader | TargetHeader | HunkHeader


def classify_source_header(line: str) -> SourceHeader | None:
    match = _SOURCE_HEADER.match(line)
    if match is None:
        return None
    return SourceHeader(match.group("filename"), match.group("timestamp"))


def classify_target_header(line: str) -> TargetHeader | None:
    match = _TARGET_HEADER.match(line)
    if match is None:
        return None
    return TargetHeader(match.group("filename"), match.group("timestamp"))


def classify_hunk_header(line: str) -> HunkHeader | None:
    match = _HUNK_HEADER.match(line)
    if match is None:
        return None

    source_length = match.group("source_length")
    if source_length is None:
        source_length = MISSING_LENGTH
    target_length = match.group("target_length")
    if target_length is None:
        target_length = MISSING_LENGTH

    return HunkHeader(
        source_start=match.group("source_start"),
        source_length=source_length,
        target_start=match.group("target_start"),
        target_length=target_length,
        section_header=match.group("section_header"),
    )


def classify_body_line(line: str) -> BodyLine | None:
    """Classify a line found inside a hunk.

    Parameters
    ----------
    line : str
        One line of diff text, without its line terminator.

    Returns
    -------
    BodyLine | None
        The line type and value, or None if the line cannot appear in a
        hunk body.
    """
    if line.endswith(NO_NEWLINE_MARKER):
        return BodyLine(LineType.EMPTY, line[1:])
    if not line:
        return BodyLine(LineType.CONTEXT, "")

    line_type = _BODY_MARKERS.get(line[0])
    if line_type is None:
        return None
    return BodyLine(line_type, line[1:])


def classify_header(line: str) -> Classified | None:
    """Try the header matchers in order: source, target, hunk."""
    for matcher in (classify_source_header, classify_target_header, classify_hunk_header):
        result = matcher(line)
        if result is not None:
            return result
    return None

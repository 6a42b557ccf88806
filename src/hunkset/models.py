"""Data models for parsed unified diffs.

This module defines the structures a diff is parsed into:
- Line - One typed, numbered line of a hunk body
- Hunk - A contiguous block of lines with its declared extents
- PatchedFile - All hunks for one source/target file pair
- PatchSet - Every file pair in a diff, in order of appearance

Each level can be printed back to unified diff text with ``str()``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from hunkset.encoding import DEFAULT_ENCODING, canonical_encoding, decode, lookup_encoding

DEV_NULL = "/dev/null"


class LineType(Enum):
    """Type of a hunk body line, valued by its diff marker."""

    ADDED = "+"
    REMOVED = "-"
    CONTEXT = " "
    EMPTY = "\\"  # "\ No newline at end of file"

    def __str__(self) -> str:
        return self.value


@dataclass
class Line:
    """A single line of a hunk body.

    Attributes:
        value: The line content (without its type marker)
        line_type: Added, removed, context or no-newline marker
        source_line_no: Line number in the source file (None for additions)
        target_line_no: Line number in the target file (None for removals)
        diff_line_no: 1-based position of the line in the diff text
    """

    value: str
    line_type: LineType
    source_line_no: int | None = None
    target_line_no: int | None = None
    diff_line_no: int = 0

    def is_added(self) -> bool:
        return self.line_type is LineType.ADDED

    def is_removed(self) -> bool:
        return self.line_type is LineType.REMOVED

    def is_context(self) -> bool:
        return self.line_type is LineType.CONTEXT

    def is_empty(self) -> bool:
        """Check if this is a no-newline marker rather than file content."""
        return self.line_type is LineType.EMPTY

    def __str__(self) -> str:
        return f"{self.line_type}{self.value}"


@dataclass
class Hunk:
    """A contiguous block of changes in a file.

    A hunk represents one @@ section from a unified diff. The start and
    length fields are the values declared in the header, not recomputed
    from the lines.

    Attributes:
        source_start: Starting line number in the source file
        source_length: Number of lines from the source file
        target_start: Starting line number in the target file
        target_length: Number of lines in the target file
        section_header: Text after the closing ``@@`` (e.g. "def foo():")

    Lines are indexed like a list: negative positions count from the
    end and positions outside the hunk raise IndexError.
    """

    source_start: int
    source_length: int
    target_start: int
    target_length: int
    section_header: str = ""
    _lines: list[Line] = field(default_factory=list, init=False, repr=False)
    _added: int = field(default=0, init=False, repr=False)
    _removed: int = field(default=0, init=False, repr=False)

    def append(self, line: Line) -> None:
        """Append a line, counting it if it is an addition or removal."""
        if line.is_added():
            self._added += 1
        elif line.is_removed():
            self._removed += 1
        self._lines.append(line)

    def added(self) -> int:
        """Number of added lines appended so far."""
        return self._added

    def removed(self) -> int:
        """Number of removed lines appended so far."""
        return self._removed

    @property
    def lines(self) -> list[Line]:
        """The hunk's lines, in diff order. Mutations apply to the hunk."""
        return self._lines

    def source_lines(self) -> list[Line]:
        """Lines present in the source file (context and removed)."""
        return [line for line in self._lines if line.is_context() or line.is_removed()]

    def target_lines(self) -> list[Line]:
        """Lines present in the target file (context and added)."""
        return [line for line in self._lines if line.is_context() or line.is_added()]

    def is_empty(self) -> bool:
        return not self._lines

    def to_header(self) -> str:
        """Generate the @@ header line."""
        return (
            f"@@ -{self.source_start},{self.source_length} "
            f"+{self.target_start},{self.target_length} @@ {self.section_header}"
        )

    def __str__(self) -> str:
        return self.to_header() + "\n" + "\n".join(str(line) for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __getitem__(self, index: int) -> Line:
        return self._lines[index]

    def __setitem__(self, index: int, line: Line) -> None:
        self._lines[index] = line


@dataclass
class PatchedFile:
    """All hunks for one file pair of a diff.

    The header names are kept exactly as written, including any ``a/``
    or ``b/`` prefix and ``/dev/null``. Classification as added, removed
    or modified is derived from the hunks on every call.

    Attributes:
        source_file: Name from the ``---`` header
        target_file: Name from the ``+++`` header
        source_timestamp: Timestamp after the tab in the ``---`` header
        target_timestamp: Timestamp after the tab in the ``+++`` header
        hunks: Hunks in diff order

    Hunks are indexed like a list: negative positions count from the
    end and positions outside the file raise IndexError.
    """

    source_file: str
    target_file: str
    source_timestamp: str | None = None
    target_timestamp: str | None = None
    hunks: list[Hunk] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.hunks is None:
            self.hunks = []

    def path(self) -> str:
        """Relative path of the file, with the ``a/`` / ``b/`` prefix removed.

        Returns
        -------
        str
            The source name without ``a/`` when the target is ``b/...`` or
            ``/dev/null``; the target name without ``b/`` when the source
            is ``/dev/null``; otherwise the raw source name.
        """
        source, target = self.source_file, self.target_file
        if source.startswith("a/") and target.startswith("b/"):
            return source[2:]
        if source.startswith("a/") and target == DEV_NULL:
            return source[2:]
        if target.startswith("b/") and source == DEV_NULL:
            return target[2:]
        return source

    def added(self) -> int:
        """Total added lines across all hunks."""
        return sum(hunk.added() for hunk in self.hunks)

    def removed(self) -> int:
        """Total removed lines across all hunks."""
        return sum(hunk.removed() for hunk in self.hunks)

    def is_added_file(self) -> bool:
        """Check if the only hunk starts from an empty source (``-0,0``)."""
        return (
            len(self.hunks) == 1
            and self.hunks[0].source_start == 0
            and self.hunks[0].source_length == 0
        )

    def is_removed_file(self) -> bool:
        """Check if the only hunk leaves an empty target (``+0,0``)."""
        return (
            len(self.hunks) == 1
            and self.hunks[0].target_start == 0
            and self.hunks[0].target_length == 0
        )

    def is_modified_file(self) -> bool:
        return not self.is_added_file() and not self.is_removed_file()

    def is_empty(self) -> bool:
        return not self.hunks

    def __str__(self) -> str:
        header = f"--- {self.source_file}\n+++ {self.target_file}\n"
        return header + "\n".join(str(hunk) for hunk in self.hunks)

    def __len__(self) -> int:
        return len(self.hunks)

    def __iter__(self) -> Iterator[Hunk]:
        return iter(self.hunks)

    def __getitem__(self, index: int) -> Hunk:
        return self.hunks[index]

    def __setitem__(self, index: int, hunk: Hunk) -> None:
        self.hunks[index] = hunk


@dataclass(kw_only=True)
class PatchSet:
    """A parsed unified diff: every file pair, in order of appearance.

    Parsing appends to the instance, so several diffs can be parsed into
    the same PatchSet. Start from a fresh instance to keep them apart.

    Attributes:
        files: Patched files in diff order
        encoding: Codec used by ``parse_bytes``

    Both fields are keyword-only. Files are indexed like a list:
    negative positions count from the end and positions outside the
    PatchSet raise IndexError.

    Examples
    --------
    >>> patch_set = PatchSet.from_string(diff_text)
    >>> for patched_file in patch_set:
    ...     for hunk in patched_file:
    ...         for line in hunk:
    ...             print(line.target_line_no, line)
    """

    files: list[PatchedFile] = field(default_factory=list)
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        self.encoding = canonical_encoding(self.encoding)

    @classmethod
    def from_string(cls, text: str) -> PatchSet:
        """Create a PatchSet and parse ``text`` into it."""
        patch_set = cls()
        patch_set.parse(text)
        return patch_set

    @classmethod
    def from_encoding(cls, label: str) -> PatchSet:
        """Create an empty PatchSet decoding bytes with codec ``label``.

        Unlike the constructor, an unknown label falls back to UTF-8.
        Labels are Python codec names, not WHATWG encoding labels: for
        example "latin1" selects ISO-8859-1 here, not windows-1252.
        """
        return cls(encoding=lookup_encoding(label))

    def parse(self, text: str) -> None:
        """Parse unified diff text, appending its files to this PatchSet.

        Raises
        ------
        ParseError
            On the first malformed header or hunk line. Files finished
            before the error stay in ``files``.
        """
        from hunkset.parser import PatchSetParser

        PatchSetParser().parse(text, self)

    def parse_bytes(self, data: bytes) -> None:
        """Decode ``data`` with this PatchSet's encoding, then parse it."""
        self.parse(decode(data, self.encoding))

    def added_files(self) -> list[PatchedFile]:
        return [f for f in self.files if f.is_added_file()]

    def removed_files(self) -> list[PatchedFile]:
        return [f for f in self.files if f.is_removed_file()]

    def modified_files(self) -> list[PatchedFile]:
        return [f for f in self.files if f.is_modified_file()]

    def added(self) -> int:
        """Total added lines across all files."""
        return sum(f.added() for f in self.files)

    def removed(self) -> int:
        """Total removed lines across all files."""
        return sum(f.removed() for f in self.files)

    def is_empty(self) -> bool:
        return not self.files

    def summary(self) -> str:
        """Generate a human-readable summary.

        Returns
        -------
        str
            File counts by kind, then one ``path: +added/-removed`` line
            per file.
        """
        lines = [
            f"PatchSet: {len(self.files)} file(s)",
            f"  +{self.added()}/-{self.removed()} lines",
        ]
        if self.added_files():
            lines.append(f"  Added: {len(self.added_files())}")
        if self.removed_files():
            lines.append(f"  Removed: {len(self.removed_files())}")
        if self.modified_files():
            lines.append(f"  Modified: {len(self.modified_files())}")

        lines.append("Files:")
        for patched_file in self.files:
            status = ""
            if patched_file.is_added_file():
                status = " (added)"
            elif patched_file.is_removed_file():
                status = " (removed)"
            lines.append(
                f"  {patched_file.path()}{status}: "
                f"+{patched_file.added()}/-{patched_file.removed()}"
            )

        return "\n".join(lines)

    def __str__(self) -> str:
        return "\n".join(str(patched_file) for patched_file in self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[PatchedFile]:
        return iter(self.files)

    def __getitem__(self, index: int) -> PatchedFile:
        return self.files[index]

    def __setitem__(self, index: int, patched_file: PatchedFile) -> None:
        self.files[index] = patched_file

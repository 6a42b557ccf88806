"""Parser for unified diff text.

Parsing runs on two levels. PatchSetParser walks the document one line
at a time, pairing ``---``/``+++`` headers into PatchedFile objects and
ignoring anything between file sections. When it meets a ``@@`` header
it hands the following lines to build_hunk, which consumes only as many
lines as the header's declared lengths call for. Scanning resumes right
after the last consumed line.
"""
from __future__ import annotations

import logging
from typing import Sequence

from hunkset.classifier import (
    HunkHeader,
    SourceHeader,
    TargetHeader,
    classify_body_line,
    classify_header,
)
from hunkset.errors import (
    ExpectLineError,
    ParseError,
    TargetWithoutSourceError,
    UnexpectedHunkError,
)
from hunkset.models import Hunk, Line, LineType, PatchedFile, PatchSet
from hunkset.results import ErrorResult, Result

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split diff text into lines.

    Lines end at ``\\n``; a trailing ``\\r`` is dropped from each line and
    a final newline does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_hunk(header: HunkHeader, lines: Sequence[str], start: int) -> tuple[Hunk, int]:
    """Build a hunk from its header and the lines that follow it.

    Source and target cursors start at the declared start values. Added
    lines advance the target cursor, removed lines the source cursor,
    context lines both and no-newline markers neither. Consumption stops
    as soon as both cursors reach ``start + length``, or at end of input.

    Parameters
    ----------
    header : HunkHeader
        The classified ``@@`` line.
    lines : Sequence[str]
        Every line of the document.
    start : int
        0-based index of the first line after the header.

    Returns
    -------
    tuple[Hunk, int]
        The hunk, and the index of the first line it did not consume.

    Raises
    ------
    ExpectLineError
        If a line within the hunk is not a valid body line.
    """
    hunk = Hunk(
        source_start=int(header.source_start),
        source_length=int(header.source_length),
        target_start=int(header.target_start),
        target_length=int(header.target_length),
        section_header=header.section_header,
    )
    source_line_no = hunk.source_start
    target_line_no = hunk.target_start
    expected_source_end = hunk.source_start + hunk.source_length
    expected_target_end = hunk.target_start + hunk.target_length

    index = start
    while index < len(lines):
        text = lines[index]
        body = classify_body_line(text)
        if body is None:
            raise ExpectLineError(text, index + 1)

        line = Line(body.value, body.line_type, diff_line_no=index + 1)
        if body.line_type is LineType.ADDED:
            line.target_line_no = target_line_no
            target_line_no += 1
        elif body.line_type is LineType.REMOVED:
            line.source_line_no = source_line_no
            source_line_no += 1
        elif body.line_type is LineType.CONTEXT:
            line.source_line_no = source_line_no
            line.target_line_no = target_line_no
            source_line_no += 1
            target_line_no += 1

        hunk.append(line)
        index += 1

        if source_line_no >= expected_source_end and target_line_no >= expected_target_end:
            break

    return hunk, index


class PatchSetParser:
    """Parser turning unified diff text into a PatchSet.

    Examples
    --------
    >>> parser = PatchSetParser()
    >>> patch_set = parser.parse(diff_text)
    >>> print(len(patch_set), patch_set.added(), patch_set.removed())
    2 14 3

    >>> # Append a second diff to the same PatchSet
    >>> parser.parse(more_diff_text, patch_set)
    """

    def parse(self, text: str, patch_set: PatchSet | None = None) -> PatchSet:
        """Parse diff text into a PatchSet.

        Parameters
        ----------
        text : str
            The unified diff text.
        patch_set : PatchSet | None
            PatchSet to append the parsed files to. A new one is created
            if omitted.

        Returns
        -------
        PatchSet
            The PatchSet holding the parsed files.

        Raises
        ------
        ParseError
            On the first malformed header or hunk line.
        """
        if patch_set is None:
            patch_set = PatchSet()

        lines = split_lines(text)
        initial_count = len(patch_set.files)
        source: SourceHeader | None = None
        current_file: PatchedFile | None = None

        index = 0
        while index < len(lines):
            line = lines[index]
            header = classify_header(line)
            index += 1

            if isinstance(header, SourceHeader):
                if current_file is not None:
                    self._finish_file(patch_set, current_file)
                    current_file = None
                source = header

            elif isinstance(header, TargetHeader):
                if current_file is not None or source is None:
                    raise TargetWithoutSourceError(line, index)
                current_file = PatchedFile(
                    source_file=source.filename,
                    target_file=header.filename,
                    source_timestamp=source.timestamp,
                    target_timestamp=header.timestamp,
                )

            elif isinstance(header, HunkHeader):
                if current_file is None:
                    raise UnexpectedHunkError(line, index)
                hunk, index = build_hunk(header, lines, index)
                current_file.hunks.append(hunk)

        if current_file is not None:
            self._finish_file(patch_set, current_file)

        logger.debug("Parsed %d file(s)", len(patch_set.files) - initial_count)
        return patch_set

    def parse_bytes(self, data: bytes, patch_set: PatchSet | None = None) -> PatchSet:
        """Decode ``data`` with the PatchSet's encoding and parse it."""
        if patch_set is None:
            patch_set = PatchSet()
        patch_set.parse_bytes(data)
        return patch_set

    def parse_to_result(self, text: str) -> Result:
        """Parse diff text and return a Result object.

        Parameters
        ----------
        text : str
            The diff text to parse.

        Returns
        -------
        Result
            Result with the parsed PatchSet in its data field, or an
            ErrorResult carrying the ParseError. The ErrorResult's data
            holds the files parsed before the error.
        """
        patch_set = PatchSet()
        try:
            self.parse(text, patch_set)
        except ParseError as e:
            return ErrorResult(
                message=f"Failed to parse diff: {e}",
                data=patch_set,
                exception=e,
                operation="parse",
                line_no=e.line_no,
            )
        return Result(
            success=True,
            message=f"Parsed diff with {len(patch_set)} file(s)",
            data=patch_set,
        )

    def _finish_file(self, patch_set: PatchSet, patched_file: PatchedFile) -> None:
        logger.debug(
            "Parsed %s: %d hunk(s), +%d/-%d",
            patched_file.path(),
            len(patched_file),
            patched_file.added(),
            patched_file.removed(),
        )
        patch_set.files.append(patched_file)


def parse_patch(text: str) -> PatchSet:
    """Convenience function to parse diff text into a new PatchSet."""
    return PatchSetParser().parse(text)


def parse_patch_to_result(text: str) -> Result:
    """Convenience function to parse diff text without raising."""
    return PatchSetParser().parse_to_result(text)

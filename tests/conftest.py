"""
Shared pytest fixtures for the hunkset test suite.

This module provides sample diff texts covering:
- A git diff creating a file
- A multi-file git diff with modified, removed and added files
- Plain ``diff -u`` output with header timestamps
- Hunks ending in no-newline markers

Fixture Naming Convention:
- sample_* : Fixtures that provide sample diff strings
- parsed_* : Fixtures that provide already-parsed PatchSets
"""
from __future__ import annotations

from textwrap import dedent

import pytest

from hunkset import PatchSet


# =============================================================================
# Sample Diff Fixtures
# =============================================================================

@pytest.fixture
def sample_added_file_diff() -> str:
    """
    Git diff adding a four-line file.

    Contains:
    - diff --git / new file mode / index preamble lines
    - /dev/null source header
    - One @@ -0,0 +1,4 @@ hunk, including a blank added line
    """
    return dedent("""\
        diff --git a/added_file b/added_file
        new file mode 100644
        index 0000000..9b710f3
        --- /dev/null
        +++ b/added_file
        @@ -0,0 +1,4 @@
        +This was missing!
        +Adding it now.
        +
        +Only for testing purposes.
    """)


@pytest.fixture
def sample_multi_file_diff() -> str:
    """
    Git diff touching three files.

    Contains:
    - README.md: modified, two hunks (+3/-2), second hunk has a section header
    - removed.txt: removed, one @@ -1,2 +0,0 @@ hunk
    - added.txt: added, one hunk whose target length is omitted
    """
    return dedent("""\
        diff --git a/README.md b/README.md
        index 1234567..89abcde 100644
        --- a/README.md
        +++ b/README.md
        @@ -1,3 +1,4 @@
         # Title
        -Old description
        +New description
        +Second line
         Footer
        @@ -10,2 +11,2 @@ ## Usage
         usage text
        -old usage
        +new usage
        diff --git a/removed.txt b/removed.txt
        deleted file mode 100644
        --- a/removed.txt
        +++ /dev/null
        @@ -1,2 +0,0 @@
        -gone
        -also gone
        diff --git a/added.txt b/added.txt
        new file mode 100644
        --- /dev/null
        +++ b/added.txt
        @@ -0,0 +1 @@
        +hello
    """)


@pytest.fixture
def sample_timestamp_diff() -> str:
    """Plain diff -u output with tab-separated header timestamps."""
    return (
        "--- old/file.c\t2024-01-01 10:00:00.000000000 +0000\n"
        "+++ new/file.c\t2024-01-02 11:30:00.000000000 +0000\n"
        "@@ -1,2 +1,2 @@\n"
        "-int x;\n"
        "+int y;\n"
        " return 0;\n"
    )


@pytest.fixture
def sample_no_newline_diff() -> str:
    """Diff where both sides of the file lack a trailing newline."""
    return dedent("""\
        --- a/f.txt
        +++ b/f.txt
        @@ -1,2 +1,2 @@
         same
        -old
        \\ No newline at end of file
        +new
        \\ No newline at end of file
    """)


# =============================================================================
# Parsed PatchSet Fixtures
# =============================================================================

@pytest.fixture
def parsed_multi_file(sample_multi_file_diff: str) -> PatchSet:
    """The multi-file sample, already parsed."""
    return PatchSet.from_string(sample_multi_file_diff)

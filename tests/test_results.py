"""
Tests for hunkset.results and the non-raising parse entry point.

Coverage targets:
- Result: success state, boolean evaluation
- ErrorResult: error details, partial data, raise_if_error behavior
"""
from __future__ import annotations

import pytest

from hunkset import (
    ErrorResult,
    PatchSet,
    Result,
    UnexpectedHunkError,
    parse_patch_to_result,
)


# =============================================================================
# Result Tests
# =============================================================================

class TestResult:
    """Tests for the Result classes themselves."""

    def test_successful_result(self):
        """A successful Result is truthy and not an error."""
        result = Result(success=True, message="done")

        assert bool(result) is True
        assert result.is_error() is False
        assert result.data is None

    def test_error_result_defaults(self):
        """ErrorResult is always unsuccessful."""
        result = ErrorResult(message="failed")

        assert result.success is False
        assert bool(result) is False
        assert result.is_error() is True

    def test_raise_if_error_without_exception(self):
        """With no exception attached a RuntimeError carries the message."""
        with pytest.raises(RuntimeError, match="failed"):
            ErrorResult(message="failed").raise_if_error()


# =============================================================================
# parse_to_result Tests
# =============================================================================

class TestParseToResult:
    """Tests for parsing into a Result."""

    def test_success(self, sample_multi_file_diff):
        """A clean parse returns the PatchSet as data."""
        result = parse_patch_to_result(sample_multi_file_diff)

        assert result
        assert isinstance(result.data, PatchSet)
        assert len(result.data) == 3
        assert result.message == "Parsed diff with 3 file(s)"

    def test_failure(self):
        """A parse error becomes an ErrorResult."""
        result = parse_patch_to_result("--- a/x\n+++ b/x\n@@ -1 +1 @@\n-a\n--- a/y\n@@ -1 +1 @@\n")

        assert isinstance(result, ErrorResult)
        assert not result
        assert result.operation == "parse"
        assert result.line_no == 6
        assert isinstance(result.exception, UnexpectedHunkError)
        assert result.message == "Failed to parse diff: Unexpected hunk found: @@ -1 +1 @@"

    def test_failure_keeps_partial_data(self):
        """Files finished before the error are in the ErrorResult's data."""
        result = parse_patch_to_result("--- a/x\n+++ b/x\n@@ -1 +1 @@\n-a\n--- a/y\n@@ -1 +1 @@\n")

        assert [f.path() for f in result.data] == ["x"]

    def test_raise_if_error(self):
        """raise_if_error re-raises the original ParseError."""
        result = parse_patch_to_result("@@ -1 +1 @@\n")

        with pytest.raises(UnexpectedHunkError):
            result.raise_if_error()

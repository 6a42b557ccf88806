"""Result types for non-raising parse calls.

This module defines:
- Result - Outcome of a parse, with the PatchSet as its payload
- ErrorResult - Outcome of a parse that stopped on a ParseError
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Result:
    """Outcome of a parse call.

    Attributes:
        success: Whether the diff parsed cleanly
        message: Human-readable description of what happened
        data: The PatchSet produced by the parse
    """

    success: bool
    message: str
    data: Any = None

    def __bool__(self) -> bool:
        return self.success

    def is_error(self) -> bool:
        """Check if this result represents an error."""
        return not self.success


@dataclass
class ErrorResult(Result):
    """Result for a failed parse - never raises automatically.

    Attributes:
        exception: The ParseError that stopped the parse
        operation: Name of the attempted operation
        line_no: 1-based diff line the error was found on, if known
    """

    success: bool = field(default=False, init=False)
    exception: Exception | None = None
    operation: str = ""
    line_no: int | None = None

    def raise_if_error(self) -> None:
        """Explicitly re-raise the exception if the caller wants to."""
        if self.exception:
            raise self.exception
        raise RuntimeError(self.message)

"""Structured error types for the Tally translator.

Errors carry:
- the source path and line/column when known
- the token position for parser errors
- expected vs. found token information
- an error code for programmatic handling
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TallyError(Exception):
    """Base class for all errors surfaced to users."""

    message: str
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "TALLY_ERROR"

    def __str__(self) -> str:
        parts = []

        if self.path:
            parts.append(f"File: {self.path}")

        if self.line is not None:
            if self.column is not None:
                parts.append(f"Line {self.line}:{self.column}")
            else:
                parts.append(f"Line {self.line}")

        parts.append(f"[{self.code}] {self.message}")

        return " | ".join(parts)


@dataclass
class TallySyntaxError(TallyError):
    """A statement did not have the token shape its grammar rule requires."""

    position: Optional[int] = None
    expected: List[str] = field(default_factory=list)
    found: Optional[str] = None
    suggestion: Optional[str] = None
    code: str = "SYNTAX_ERROR"

    def __str__(self) -> str:
        base = super().__str__()
        details = []

        if self.expected:
            if len(self.expected) == 1:
                details.append(f"Expected: {self.expected[0]}")
            else:
                details.append(f"Expected one of: {', '.join(self.expected)}")

        if self.found:
            details.append(f"Found: {self.found}")

        if self.suggestion:
            details.append(f"Suggestion: {self.suggestion}")

        if details:
            return base + "\n  " + "\n  ".join(details)

        return base


def create_syntax_error(
    message: str,
    *,
    path: Optional[str] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
    position: Optional[int] = None,
    expected: Optional[List[str]] = None,
    found: Optional[str] = None,
    suggestion: Optional[str] = None,
) -> TallySyntaxError:
    """Create a syntax error with context."""
    return TallySyntaxError(
        message=message,
        path=path or None,
        line=line,
        column=column,
        position=position,
        expected=expected or [],
        found=found,
        suggestion=suggestion,
    )


__all__ = [
    "TallyError",
    "TallySyntaxError",
    "create_syntax_error",
]

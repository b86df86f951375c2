"""Source location information for tokens."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Where a token came from in the source text.

    ``start`` and ``end`` are character offsets (end exclusive), ``line`` and
    ``column`` are 1-based and refer to ``start``.
    """
    file: str
    line: int
    column: int
    start: int
    end: int

    def __str__(self) -> str:
        name = self.file or "<source>"
        return f"{name}:{self.line}:{self.column}"


__all__ = ["SourceLocation"]

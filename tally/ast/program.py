"""Program level AST node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .statements import Statement


@dataclass(frozen=True)
class Program:
    """Parsed statements in source order."""

    body: Tuple[Statement, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.body)

    def __len__(self) -> int:
        return len(self.body)


__all__ = ["Program"]

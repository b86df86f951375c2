"""Statement nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class VariableDeclaration:
    """``identifier : kind, value_type = value;``

    ``kind`` and ``value_type`` are kept as written; code generation only
    reads ``identifier`` and ``value``.
    """

    identifier: str
    kind: str
    value_type: str
    value: str


@dataclass(frozen=True)
class LogStatement:
    """``log argument;``"""

    argument: str


Statement = Union[VariableDeclaration, LogStatement]


__all__ = [
    "VariableDeclaration",
    "LogStatement",
    "Statement",
]

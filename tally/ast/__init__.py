"""Syntax tree dataclasses for Tally programs."""

from .program import Program
from .source_location import SourceLocation
from .statements import LogStatement, Statement, VariableDeclaration

__all__ = [
    "Program",
    "SourceLocation",
    "Statement",
    "VariableDeclaration",
    "LogStatement",
]

"""Pseudo-assembly generation for parsed Tally programs."""

from __future__ import annotations

from typing import Iterable, List, assert_never

from tally.ast import LogStatement, Program, Statement, VariableDeclaration
from tally.observability.logging import get_logger

logger = get_logger(__name__)


class AssemblyGenerator:
    """Emit one instruction line per statement, in program order."""

    def generate(self, program: Program) -> List[str]:
        lines = [self.emit(statement) for statement in program.body]
        logger.debug("Generated %d instruction(s)", len(lines))
        return lines

    def emit(self, statement: Statement) -> str:
        if isinstance(statement, VariableDeclaration):
            return self.emit_variable_declaration(statement)
        if isinstance(statement, LogStatement):
            return self.emit_log_statement(statement)
        assert_never(statement)

    def emit_variable_declaration(self, node: VariableDeclaration) -> str:
        return f"MOV {node.identifier}, {node.value}"

    def emit_log_statement(self, node: LogStatement) -> str:
        return f"PRINT {node.argument}"


def generate(program: Program) -> List[str]:
    """Translate ``program`` into instruction lines."""
    return AssemblyGenerator().generate(program)


def render(lines: Iterable[str]) -> str:
    """Join instruction lines, each terminated by a newline."""
    return "".join(f"{line}\n" for line in lines)


__all__ = ["AssemblyGenerator", "generate", "render"]

"""End-to-end translation: source text to pseudo-assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tally.ast import Program, SourceLocation
from tally.codegen import generate, render
from tally.config import TallySettings, get_settings
from tally.lang.parser import Lexer, Parser, Token
from tally.observability.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PROGRAM = "hello : constant, string = wow, this works?; log hello;"


@dataclass(frozen=True)
class Compilation:
    """Every intermediate result of one translation."""

    source: str
    tokens: Tuple[Token, ...]
    locations: Tuple[SourceLocation, ...]
    program: Program
    instructions: Tuple[str, ...]

    @property
    def text(self) -> str:
        return render(self.instructions)


def compile_unit(
    source: str,
    *,
    path: str = "",
    settings: Optional[TallySettings] = None,
) -> Compilation:
    """Run lexer, parser and generator over ``source``.

    Raises:
        TallySyntaxError: when strict shapes are enabled and a statement is
            malformed
    """
    settings = settings or get_settings()

    lexer = Lexer(source, path)
    tokens = lexer.tokenize()
    parser = Parser(
        tokens,
        strict=settings.strict_shapes,
        path=path,
        locations=lexer.locations,
    )
    program = parser.parse()
    instructions = generate(program)

    logger.debug(
        "Compiled %s: %d token(s), %d statement(s)",
        path or "<source>",
        len(tokens),
        len(program),
    )
    return Compilation(
        source=source,
        tokens=tuple(tokens),
        locations=tuple(lexer.locations),
        program=program,
        instructions=tuple(instructions),
    )


def compile_source(
    source: str,
    *,
    path: str = "",
    settings: Optional[TallySettings] = None,
) -> str:
    """Translate ``source`` and return the rendered pseudo-assembly."""
    return compile_unit(source, path=path, settings=settings).text


__all__ = ["Compilation", "SAMPLE_PROGRAM", "compile_source", "compile_unit"]

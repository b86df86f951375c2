"""Tally parser package.

Public API:
    parse_program(tokens, strict, path, locations) -> Program
    Parser - the statement parser
    tokenize(source, path) -> list of tokens

Error types:
    TallyError, TallySyntaxError
"""

from typing import Optional, Sequence

from tally.ast import Program, SourceLocation
from tally.config import get_settings
from tally.errors import TallyError, TallySyntaxError

from .grammar.lexer import Lexer, Token, TokenKind, tokenize
from .parse import Parser


def parse_program(
    tokens: Sequence[Token],
    *,
    strict: Optional[bool] = None,
    path: str = "",
    locations: Optional[Sequence[SourceLocation]] = None,
) -> Program:
    """
    Parse a token sequence into a Program.

    Args:
        tokens: Output of :func:`tokenize`
        strict: Check statement shapes with ``expect``; ``None`` uses the
            ``strict_shapes`` setting
        path: Optional file path for error reporting
        locations: Optional token locations from :class:`Lexer` for
            line/column in errors

    Returns:
        Program with one node per recognised statement

    Raises:
        TallySyntaxError: In strict mode, when a recognised statement does
            not have the token shape of its rule

    Example:
        ```python
        program = parse_program(tokenize("x : constant, number = 5; log x;"))
        print(program.body[1].argument)  # "x"
        ```
    """
    if strict is None:
        strict = get_settings().strict_shapes
    parser = Parser(tokens, strict=strict, path=path, locations=locations)
    return parser.parse()


__all__ = [
    "parse_program",
    "Parser",
    "Lexer",
    "Token",
    "TokenKind",
    "tokenize",
    "TallyError",
    "TallySyntaxError",
]

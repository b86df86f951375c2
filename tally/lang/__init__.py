"""Front-end of the Tally translator: lexer and parser."""

from .parser import Parser, TokenKind, parse_program, tokenize

__all__ = ["Parser", "TokenKind", "parse_program", "tokenize"]

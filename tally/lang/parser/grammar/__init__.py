"""Lexical grammar for Tally."""

from .lexer import Lexer, Token, TokenKind, tokenize

__all__ = ["Lexer", "Token", "TokenKind", "tokenize"]

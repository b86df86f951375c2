"""Lexical analyzer (tokenizer) for the Tally language.

Converts source text into a stream of tokens for parsing. Lexing never
fails: characters outside the language become UNEXPECTED tokens and the
parser decides what to do with them.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from tally.ast.source_location import SourceLocation
from tally.observability.logging import get_logger

logger = get_logger(__name__)


class TokenKind(Enum):
    """Token kinds for the Tally language."""

    WORD = "word"
    NUMBER = "number"
    COLON = "colon"
    COMMA = "comma"
    EQUALS = "equals"
    SEMICOLON = "semicolon"
    STRING = "string"
    UNEXPECTED = "unexpected"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A classified piece of source text. Its position is its list index."""

    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"


WHITESPACE = frozenset(" \n\t")
DIGITS = frozenset("0123456789")

PUNCTUATION = {
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}


def is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


class Lexer:
    """Tokenizer for Tally source code.

    ``locations`` runs parallel to the returned tokens and records the source
    span of each one.
    """

    def __init__(self, source: str, path: str = ""):
        self.source = source
        self.path = path
        self.pos = 0
        self.tokens: List[Token] = []
        self.locations: List[SourceLocation] = []

        self._line_starts = [0]
        for index, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(index + 1)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def location(self, start: int, end: int) -> SourceLocation:
        line = bisect_right(self._line_starts, start)
        column = start - self._line_starts[line - 1] + 1
        return SourceLocation(file=self.path, line=line, column=column, start=start, end=end)

    def add_token(self, kind: TokenKind, start: int, end: int, text: Optional[str] = None) -> None:
        """Add a token covering ``source[start:end]``."""
        if text is None:
            text = self.source[start:end]
        self.tokens.append(Token(kind=kind, text=text))
        self.locations.append(self.location(start, end))

    def read_while(self, predicate) -> int:
        """Advance over characters matching ``predicate``; return the start."""
        start = self.pos
        while self.peek() is not None and predicate(self.peek()):
            self.pos += 1
        return start

    def read_raw_value(self) -> None:
        """Capture everything up to the next ';' (or end of input) as one STRING.

        The ';' itself is left for the main loop.
        """
        start = self.read_while(lambda char: char != ";")
        raw = self.source[start:self.pos]
        text = raw.strip()
        leading = len(raw) - len(raw.lstrip())
        self.add_token(TokenKind.STRING, start + leading, start + leading + len(text), text)

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source."""
        while self.pos < len(self.source):
            char = self.source[self.pos]

            if char in WHITESPACE:
                self.pos += 1
                continue

            if is_letter(char):
                start = self.read_while(is_letter)
                self.add_token(TokenKind.WORD, start, self.pos)
                continue

            if char in DIGITS:
                start = self.read_while(lambda c: c in DIGITS)
                self.add_token(TokenKind.NUMBER, start, self.pos)
                continue

            if char in PUNCTUATION:
                self.add_token(PUNCTUATION[char], self.pos, self.pos + 1)
                self.pos += 1
                continue

            if char == "=":
                self.add_token(TokenKind.EQUALS, self.pos, self.pos + 1)
                self.pos += 1
                self.read_raw_value()
                continue

            self.add_token(TokenKind.UNEXPECTED, self.pos, self.pos + 1)
            self.pos += 1

        logger.debug("Lexed %d token(s) from %d character(s)", len(self.tokens), len(self.source))
        return self.tokens


def tokenize(source: str, path: str = "") -> List[Token]:
    """Convenience function to tokenize source code."""
    return Lexer(source, path).tokenize()


__all__ = ["Token", "TokenKind", "Lexer", "tokenize"]

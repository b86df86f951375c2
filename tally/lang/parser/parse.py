"""Statement parser for the Tally language.

Statements the parser does not recognise are skipped one token at a time.
Once a statement has been recognised, its remaining tokens are either checked
against the grammar (strict mode) or read by fixed offset (positional mode).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from tally.ast import LogStatement, Program, SourceLocation, Statement, VariableDeclaration
from tally.errors import TallySyntaxError, create_syntax_error
from tally.observability.logging import get_logger

from .grammar.lexer import Token, TokenKind

logger = get_logger(__name__)

LOG_KEYWORD = "log"


class Parser:
    """
    Forward-only parser over a token sequence.

    Grammar:
        program   := statement*
        statement := varDecl | logStmt
        varDecl   := WORD ':' WORD ',' WORD '=' STRING ';'
        logStmt   := 'log' WORD ';'
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        *,
        strict: bool = True,
        path: str = "",
        locations: Optional[Sequence[SourceLocation]] = None,
    ):
        self.tokens = list(tokens)
        self.strict = strict
        self.path = path
        self.locations = locations
        self.pos = 0

    # ====================================================================
    # Token Management
    # ====================================================================

    def peek(self, offset: int = 0) -> Optional[Token]:
        """Peek at token without consuming."""
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return None

    def current(self) -> Optional[Token]:
        return self.peek(0)

    def match(self, kind: TokenKind, offset: int = 0) -> bool:
        token = self.peek(offset)
        return token is not None and token.kind is kind

    def expect(self, kind: TokenKind, text: Optional[str] = None) -> Token:
        """Consume the current token if it has the given kind (and text)."""
        token = self.current()
        if token is None:
            raise self.error(
                "Unexpected end of input",
                expected=[kind.name],
                found="end of input",
                suggestion="Terminate each statement with ';'",
            )

        if token.kind is not kind or (text is not None and token.text != text):
            raise self.error(
                "Unexpected token",
                expected=[kind.name if text is None else f"{kind.name} {text!r}"],
                found=f"{token.kind.name} {token.text!r}",
                suggestion=self._suggest_token_fix(token, kind),
            )

        self.pos += 1
        return token

    def take(self, offset: int) -> str:
        """Text of the token at ``offset`` from the cursor, or '' past the end."""
        token = self.peek(offset)
        return token.text if token is not None else ""

    def error(
        self,
        message: str,
        *,
        expected: Optional[List[str]] = None,
        found: Optional[str] = None,
        suggestion: Optional[str] = None,
    ) -> TallySyntaxError:
        """Create a syntax error at the current position."""
        line = column = None
        if self.locations:
            index = min(self.pos, len(self.locations) - 1)
            location = self.locations[index]
            line = location.line
            column = location.column
            if self.pos >= len(self.locations):
                column += location.end - location.start
        return create_syntax_error(
            message,
            path=self.path,
            line=line,
            column=column,
            position=self.pos,
            expected=expected,
            found=found,
            suggestion=suggestion,
        )

    def _suggest_token_fix(self, token: Token, expected: TokenKind) -> Optional[str]:
        if expected is TokenKind.COMMA and token.kind is TokenKind.WORD:
            return "Separate the kind and the type with ','"
        if expected is TokenKind.EQUALS:
            return "Declarations need a value: 'name : kind, type = value;'"
        if expected is TokenKind.WORD and token.kind is TokenKind.NUMBER:
            return "Names may only contain letters"
        return None

    # ====================================================================
    # Parsing
    # ====================================================================

    def parse(self) -> Program:
        body: List[Statement] = []

        while self.pos < len(self.tokens):
            start = self.pos
            statement = self.parse_statement()
            assert self.pos > start, f"parser made no progress at token {start}"
            if statement is not None:
                body.append(statement)

        logger.debug("Parsed %d statement(s) from %d token(s)", len(body), len(self.tokens))
        return Program(body=tuple(body))

    def parse_statement(self) -> Optional[Statement]:
        token = self.current()

        if token.kind is TokenKind.WORD:
            if self.match(TokenKind.COLON, 1):
                return self.parse_variable_declaration()
            if token.text == LOG_KEYWORD:
                return self.parse_log_statement()

        logger.debug("Skipping %s %r at token %d", token.kind.name, token.text, self.pos)
        self.pos += 1
        return None

    def parse_variable_declaration(self) -> VariableDeclaration:
        if not self.strict:
            node = VariableDeclaration(
                identifier=self.take(0),
                kind=self.take(2),
                value_type=self.take(4),
                value=self.take(6),
            )
            self.pos += 8
            return node

        identifier = self.expect(TokenKind.WORD).text
        self.expect(TokenKind.COLON)
        kind = self.expect(TokenKind.WORD).text
        self.expect(TokenKind.COMMA)
        value_type = self.expect(TokenKind.WORD).text
        self.expect(TokenKind.EQUALS)
        value = self.expect(TokenKind.STRING).text
        self.expect(TokenKind.SEMICOLON)
        return VariableDeclaration(
            identifier=identifier,
            kind=kind,
            value_type=value_type,
            value=value,
        )

    def parse_log_statement(self) -> LogStatement:
        if not self.strict:
            node = LogStatement(argument=self.take(1))
            self.pos += 3
            return node

        self.expect(TokenKind.WORD, LOG_KEYWORD)
        argument = self.expect(TokenKind.WORD).text
        self.expect(TokenKind.SEMICOLON)
        return LogStatement(argument=argument)


__all__ = ["Parser", "LOG_KEYWORD"]

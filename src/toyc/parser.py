"""
Toy Language Recursive Descent Parser
=====================================

This module implements the parser for the toy statement language. It
pulls tokens from a `Lexer` one at a time and hands every complete
statement straight to an `Emitter`; no syntax tree is built.

Grammar
-------
program         ::= statement* EOF
statement       ::= assignment | print_stmt
assignment      ::= IDENTIFIER '=' NUMBER '+' NUMBER ';'
print_stmt      ::= 'print' IDENTIFIER ';'

Any other token where a statement would start is skipped (or rejected
in strict mode). Inside a statement the first mismatch raises
`UnexpectedTokenError` and parsing stops; there is no recovery.

Example Usage
-------------
>>> from toyc.lexer import Lexer
>>> from toyc.codegen import CodeGenerator
>>> from toyc.parser import Parser
>>> gen = CodeGenerator()
>>> Parser(Lexer("print x;"), gen).parse()
1
>>> gen.lines
['PUSH x', 'CALL PRINT', '----------------']
"""

import logging

from toyc.lexer import Lexer, Token, TokenType
from toyc.codegen import Emitter
from toyc.errors import UnexpectedTokenError, UnknownTokenError

logger = logging.getLogger(__name__)


# Names used in "expected ..." hints
EXPECTED_NAMES: dict[TokenType, str] = {
    TokenType.IDENTIFIER: "identifier",
    TokenType.NUMBER: "integer literal",
    TokenType.EQUALS: "'='",
    TokenType.PLUS: "'+'",
    TokenType.SEMICOLON: "';'",
    TokenType.PRINT: "'print'",
    TokenType.EOF: "end of input",
}


class Parser:
    """
    Recursive descent parser for the toy language.

    Keeps only the current token; every statement is parsed on its own
    and emitted as soon as its closing ';' is consumed.

    Attributes:
        lexer: Token source
        emitter: Receives each recognized statement
        strict: Reject unknown tokens instead of skipping them
    """

    def __init__(self, lexer: Lexer, emitter: Emitter, strict: bool = False):
        self.lexer = lexer
        self.emitter = emitter
        self.strict = strict
        self._current: Token = lexer.next_token()

    def parse(self) -> int:
        """
        Parse the whole token stream, emitting each statement.

        Returns:
            Number of statements emitted

        Raises:
            UnexpectedTokenError: If a statement is malformed
            UnknownTokenError: In strict mode, on an unrecognized token
        """
        count = 0

        while not self._check(TokenType.EOF):
            if self._check(TokenType.IDENTIFIER):
                self._parse_assignment()
                count += 1
            elif self._check(TokenType.PRINT):
                self._parse_print()
                count += 1
            else:
                self._skip_token()

        logger.debug(f"Parsed {count} statement(s)")
        return count

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self._current
        self._current = self.lexer.next_token()
        return token

    def _check(self, token_type: TokenType) -> bool:
        return self._current.type == token_type

    def _expect(self, token_type: TokenType) -> Token:
        """
        Expect and consume a specific token type.

        Raises:
            UnexpectedTokenError: If the current token is of another type
        """
        if self._check(token_type):
            return self._advance()

        raise UnexpectedTokenError(
            self._current,
            EXPECTED_NAMES.get(token_type),
            self.lexer.get_source_line(self._current.line),
        )

    def _skip_token(self) -> None:
        token = self._current
        if self.strict and token.type == TokenType.UNKNOWN:
            raise UnknownTokenError(token, self.lexer.get_source_line(token.line))
        logger.debug(f"Skipping {token!r} at statement start")
        self._advance()

    # =========================================================================
    # Statement Parsing
    # =========================================================================

    def _parse_assignment(self) -> None:
        """Parse ``IDENTIFIER '=' NUMBER '+' NUMBER ';'``."""
        target = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.EQUALS)
        left = self._expect(TokenType.NUMBER).value
        self._expect(TokenType.PLUS)
        right = self._expect(TokenType.NUMBER).value
        self._expect(TokenType.SEMICOLON)

        self.emitter.emit_assignment(target, left, right)

    def _parse_print(self) -> None:
        """Parse ``'print' IDENTIFIER ';'``."""
        self._expect(TokenType.PRINT)
        target = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.SEMICOLON)

        self.emitter.emit_print(target)


def parse(lexer: Lexer, emitter: Emitter, strict: bool = False) -> int:
    """
    Parse all statements from `lexer` into `emitter`.

    Convenience wrapper around Parser; returns the statement count.
    """
    return Parser(lexer, emitter, strict=strict).parse()

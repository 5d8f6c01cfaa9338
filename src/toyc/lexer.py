"""
Toy Language Lexer (Tokenizer)
==============================

This module implements the lexer for the toy statement language.
It converts source text into a lazy stream of tokens for the parser.

Token Categories
----------------
- Keyword: print
- Identifiers: an ASCII letter followed by letters or digits
- Numbers: unsigned decimal digits
- Symbols: = + ;
- Anything else becomes a single-character UNKNOWN token

There are no comments, escape sequences, negative numbers or floats.

Example Usage
-------------
>>> from toyc.lexer import Lexer
>>> lexer = Lexer("x = 10 + 5;", "test.toy")
>>> for token in lexer.tokenize():
...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(EQUALS, '=', 1:3)
Token(NUMBER, '10', 1:5)
Token(PLUS, '+', 1:8)
Token(NUMBER, '5', 1:10)
Token(SEMICOLON, ';', 1:11)
Token(EOF, 1:12)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import string

from toyc.errors import SourceLocation


# Identifier and number text was historically kept in a 100-byte buffer
# (99 characters plus terminator).
DEFAULT_MAX_TOKEN_LENGTH = 99


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for the toy language."""

    IDENTIFIER = auto()     # Variable names like x, total1
    NUMBER = auto()         # Integer literals like 10
    EQUALS = auto()         # =
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    PRINT = auto()          # print keyword
    EOF = auto()            # End of input
    UNKNOWN = auto()        # Any other single character


KEYWORDS: dict[str, TokenType] = {
    "print": TokenType.PRINT,
}

SYMBOLS: dict[str, TokenType] = {
    "=": TokenType.EQUALS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from toy source code.

    Attributes:
        type: The TokenType classification
        value: The literal text matched ("" for EOF)
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    type: TokenType
    value: str
    line: int = 1
    column: int = 1
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value:
            return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes toy source code on demand.

    Each call to next_token() scans exactly one token. The read position
    only moves forward; once the end of input is reached every further
    call returns an EOF token. A lexer cannot be restarted, create a new
    one instead.

    Usage:
        lexer = Lexer(source_text, filename)
        token = lexer.next_token()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        max_token_length: Longest identifier/number text kept, or None
    """

    IDENT_START = string.ascii_letters
    IDENT_CHARS = string.ascii_letters + string.digits
    DIGITS = string.digits
    WHITESPACE = string.whitespace

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        max_token_length: Optional[int] = DEFAULT_MAX_TOKEN_LENGTH,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The toy source code to tokenize
            filename: Name of the source file (for error messages)
            max_token_length: Truncate identifier and number text to this
                many characters. None keeps the full text.
        """
        self.source = source
        self.filename = filename
        self.max_token_length = max_token_length

        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def position(self) -> int:
        """Current read offset into the source."""
        return self._pos

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EOF token.

        Yields:
            Token objects representing each lexical element
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        start_line, start_column = self._line, self._column

        if self._at_end():
            return self._make_token(TokenType.EOF, "", start_line, start_column)

        char = self._peek()

        if char in self.IDENT_START:
            text = self._consume_while(self.IDENT_CHARS)
            # Classify on the full lexeme, truncate only the stored text
            token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
            return self._make_token(token_type, self._truncate(text), start_line, start_column)

        if char in self.DIGITS:
            text = self._consume_while(self.DIGITS)
            return self._make_token(TokenType.NUMBER, self._truncate(text), start_line, start_column)

        self._advance()
        token_type = SYMBOLS.get(char, TokenType.UNKNOWN)
        return self._make_token(token_type, char, start_line, start_column)

    def get_source_line(self, line: int) -> Optional[str]:
        """Return the text of a 1-indexed source line, for error context."""
        lines = self.source.splitlines()
        if 0 < line <= len(lines):
            return lines[line - 1]
        return None

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        Updates line and column tracking for error reporting.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek() in self.WHITESPACE:
            self._advance()

    def _consume_while(self, allowed: str) -> str:
        """Consume a run of characters from `allowed` and return its full text."""
        start = self._pos
        while not self._at_end() and self._peek() in allowed:
            self._advance()
        return self.source[start:self._pos]

    def _truncate(self, text: str) -> str:
        """Cut identifier/number text to max_token_length, if set."""
        if self.max_token_length is not None:
            return text[:self.max_token_length]
        return text

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        line: int,
        column: int,
    ) -> Token:
        return Token(
            type=token_type,
            value=value,
            line=line,
            column=column,
            filename=self.filename,
        )

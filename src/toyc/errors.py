"""
toyc Error Hierarchy
====================

This module defines the exception hierarchy for the toy compiler.
All exceptions inherit from ToyError, allowing callers to catch every
compiler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
ToyError (base)
└── ToySyntaxError - lexer and parser syntax errors
    ├── UnexpectedTokenError - token does not match the grammar rule
    └── UnknownTokenError - unrecognized character (strict mode only)

Error Message Format
--------------------
All errors include source location information when it is known:

    prog.toy:3:7: error: unexpected token ';'
        x = 10;
              ^
    hint: expected '+'
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from toyc.lexer import Token


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class ToyError(Exception):
    """
    Base exception for all toyc errors.

    Provides common formatting for location, source context and hints.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.toy:1:7: error: unexpected token ';'
                x = 10;
                      ^
            hint: expected '+'
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Syntax Errors
# =============================================================================

class ToySyntaxError(ToyError):
    """
    Syntax error in toy source code.

    Raised when the parser finds a token that does not fit the statement
    being parsed. Parsing stops at the first such error; instructions
    already emitted for earlier statements are left in place.

    The offending token is available as ``token`` and its literal text
    as ``found``. When raised through the compiler driver, the lines that
    were emitted before the failure are attached as ``partial_output``.
    """

    def __init__(
        self,
        message: str,
        token: Optional["Token"] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.token = token
        self.found = token.value if token is not None else ""
        self.partial_output: list[str] = []
        super().__init__(
            message,
            location=token.location if token is not None else None,
            hint=hint,
            source_line=source_line,
        )


class UnexpectedTokenError(ToySyntaxError):
    """
    Unexpected token during parsing.

    Raised when the current token's type does not match the type the
    grammar requires at this point, e.g. ``x = 10;`` fails on ``;``
    because ``+`` was required.
    """

    def __init__(
        self,
        token: "Token",
        expected: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected

        if token.value:
            message = f"unexpected token '{token.value}'"
        else:
            message = "unexpected end of input"

        hint = f"expected {expected}" if expected else None

        super().__init__(
            message,
            token=token,
            hint=hint,
            source_line=source_line,
        )


class UnknownTokenError(ToySyntaxError):
    """
    Unrecognized character at the start of a statement.

    Only raised in strict mode; by default such tokens are skipped.
    """

    def __init__(
        self,
        token: "Token",
        source_line: Optional[str] = None,
    ):
        super().__init__(
            f"unknown token '{token.value}'",
            token=token,
            hint="statements start with an identifier or 'print'",
            source_line=source_line,
        )

"""
toyc Compiler Main Module
=========================

This module provides the main compiler interface. It wires the
pipeline together:

    Source → Lexer → Parser → CodeGenerator → Pseudo-assembly

Usage
-----
Command line:
    $ toyc prog.toy -o prog.asm

Programmatic:
    >>> from toyc import compile_toy
    >>> print(compile_toy("x = 10 + 5;"), end="")
    LOAD 10
    ADD 5
    STORE x
    ----------------

Error Handling
--------------
Compilation stops at the first syntax error. Lines emitted before the
error are not rolled back: they reach any streaming sink immediately
and are attached to the raised error as ``partial_output``.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional
import logging

from toyc.lexer import Lexer, DEFAULT_MAX_TOKEN_LENGTH
from toyc.parser import Parser
from toyc.codegen import CodeGenerator
from toyc.errors import ToySyntaxError

logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        max_token_length: Identifier and number text longer than this is
                          truncated. None disables truncation.
        strict: Treat unrecognized characters between statements as
                syntax errors instead of skipping them.
    """
    max_token_length: Optional[int] = DEFAULT_MAX_TOKEN_LENGTH
    strict: bool = False

    def __post_init__(self):
        if self.max_token_length is not None and self.max_token_length < 1:
            raise ValueError(
                f"max_token_length must be positive or None, got {self.max_token_length}"
            )


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        lines: Emitted instruction lines, in order
        statement_count: Number of statements translated
    """
    filename: str = ""
    lines: list[str] = field(default_factory=list)
    statement_count: int = 0

    @property
    def assembly(self) -> str:
        """The listing as text, one instruction per line."""
        if not self.lines:
            return ""
        return "\n".join(self.lines) + "\n"


class ToyCompiler:
    """
    Compiler for the toy statement language.

    Example:
        compiler = ToyCompiler()
        result = compiler.compile_file("prog.toy")
        print(result.assembly)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(
        self,
        source: str,
        filename: str = "<input>",
        sink: Optional[Callable[[str], None]] = None,
    ) -> CompilerResult:
        """
        Compile toy source code to pseudo-assembly.

        Args:
            source: Complete source text
            filename: Source filename for error messages
            sink: Optional callable receiving each line as it is emitted

        Returns:
            CompilerResult with the emitted lines

        Raises:
            ToySyntaxError: On the first syntax error
        """
        lexer = Lexer(source, filename, max_token_length=self.options.max_token_length)
        generator = CodeGenerator(sink)
        parser = Parser(lexer, generator, strict=self.options.strict)

        try:
            count = parser.parse()
        except ToySyntaxError as e:
            e.partial_output = generator.lines
            logger.debug(
                f"{filename}: stopped after {generator.block_count} statement(s)"
            )
            raise

        logger.info(f"{filename}: translated {count} statement(s)")
        return CompilerResult(
            filename=filename,
            lines=generator.lines,
            statement_count=count,
        )

    def compile_file(
        self,
        filepath: str | Path,
        sink: Optional[Callable[[str], None]] = None,
    ) -> CompilerResult:
        """
        Compile a toy source file.

        The whole file is read into memory before tokenizing. Bytes are
        decoded as latin-1 so every byte maps to one character; bytes
        outside the language become single UNKNOWN tokens.

        Raises:
            ToySyntaxError: On the first syntax error
            FileNotFoundError: If the source file does not exist
        """
        source = Path(filepath).read_bytes().decode("latin-1")
        return self.compile_source(source, str(filepath), sink)


def compile_toy(source: str, filename: str = "<input>", strict: bool = False) -> str:
    """
    Compile toy source and return the pseudo-assembly text.

    Raises:
        ToySyntaxError: On the first syntax error
    """
    compiler = ToyCompiler(CompilerOptions(strict=strict))
    return compiler.compile_source(source, filename).assembly

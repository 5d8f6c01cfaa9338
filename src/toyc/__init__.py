"""
toyc - Toy Language to Pseudo-Assembly Translator
=================================================

This package translates a tiny imperative language into a readable
pseudo-assembly listing. Programs consist of two kinds of statement:

    x = 10 + 5;     assignment of the sum of two integer literals
    print x;        print a variable

Each statement becomes one block of accumulator-style instructions.

Main Components
---------------
- **lexer**: turns source text into tokens on demand
- **parser**: recursive descent over statements, drives an emitter
- **codegen**: the pseudo-assembly emitter
- **compiler**: options, file handling and the compile entry points
- **cli**: the `toyc` command

Quick Start
-----------
    >>> from toyc import compile_toy
    >>> print(compile_toy("x = 1 + 2; print x;"), end="")
    LOAD 1
    ADD 2
    STORE x
    ----------------
    PUSH x
    CALL PRINT
    ----------------

Or use the command-line tool:
    $ toyc prog.toy
"""

__version__ = "1.0.0"
__author__ = "toyc Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from toyc.compiler import ToyCompiler, CompilerOptions, CompilerResult, compile_toy
from toyc.lexer import Lexer, Token, TokenType
from toyc.parser import Parser, parse
from toyc.codegen import Emitter, CodeGenerator
from toyc.errors import (
    ToyError,
    ToySyntaxError,
    UnexpectedTokenError,
    UnknownTokenError,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Main API
    "ToyCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_toy",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    # Parser
    "Parser",
    "parse",
    # Code Generator
    "Emitter",
    "CodeGenerator",
    # Errors
    "ToyError",
    "ToySyntaxError",
    "UnexpectedTokenError",
    "UnknownTokenError",
    "SourceLocation",
]

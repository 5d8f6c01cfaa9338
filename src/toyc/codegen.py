"""
Pseudo-Assembly Code Generator
==============================

This module turns recognized statements into pseudo-instruction text.
The parser talks to an `Emitter`; `CodeGenerator` is the backend that
renders the accumulator-style listing below. Other backends can be
plugged into the parser by subclassing `Emitter`.

Instruction Blocks
------------------
Assignment ``x = 10 + 5;``::

    LOAD 10
    ADD 5
    STORE x
    ----------------

Print ``print x;``::

    PUSH x
    CALL PRINT
    ----------------

Blocks are emitted in the order their statements are recognized, with
no blank lines between them.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)

# Fixed line that closes every instruction block
SEPARATOR = "-" * 16


class Emitter(ABC):
    """Receives one call per statement recognized by the parser."""

    @abstractmethod
    def emit_assignment(self, target: str, operand1: str, operand2: str) -> None:
        """Emit code for ``target = operand1 + operand2;``."""

    @abstractmethod
    def emit_print(self, target: str) -> None:
        """Emit code for ``print target;``."""


class CodeGenerator(Emitter):
    """
    Emits the pseudo-assembly listing.

    Every line is appended to `lines` and, when a sink is given, passed
    to it immediately so output can be streamed while parsing continues.

    Example:
        gen = CodeGenerator()
        gen.emit_print("x")
        print(gen.assembly)

    Attributes:
        lines: Every line emitted so far, in order
    """

    def __init__(self, sink: Optional[Callable[[str], None]] = None):
        """
        Initialize the generator.

        Args:
            sink: Optional callable invoked with each emitted line
        """
        self._sink = sink
        self._output: list[str] = []
        self._blocks = 0

    @property
    def lines(self) -> list[str]:
        """Every line emitted so far, in order."""
        return list(self._output)

    @property
    def block_count(self) -> int:
        """Number of instruction blocks emitted."""
        return self._blocks

    @property
    def assembly(self) -> str:
        """The full listing as text, one instruction per line."""
        if not self._output:
            return ""
        return "\n".join(self._output) + "\n"

    def emit_assignment(self, target: str, operand1: str, operand2: str) -> None:
        logger.debug(f"Assignment: {target} = {operand1} + {operand2}")
        self._emit_instruction("LOAD", operand1)
        self._emit_instruction("ADD", operand2)
        self._emit_instruction("STORE", target)
        self._end_block()

    def emit_print(self, target: str) -> None:
        logger.debug(f"Print: {target}")
        self._emit_instruction("PUSH", target)
        self._emit_instruction("CALL", "PRINT")
        self._end_block()

    # =========================================================================
    # Output Helpers
    # =========================================================================

    def _emit(self, line: str) -> None:
        """Emit a line of output."""
        self._output.append(line)
        if self._sink is not None:
            self._sink(line)

    def _emit_instruction(self, mnemonic: str, operand: str) -> None:
        self._emit(f"{mnemonic} {operand}")

    def _end_block(self) -> None:
        self._emit(SEPARATOR)
        self._blocks += 1

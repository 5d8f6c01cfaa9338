# =============================================================================
# test_codegen.py - Pseudo-Assembly Emitter Tests
# =============================================================================

from toyc.codegen import CodeGenerator, Emitter, SEPARATOR


class TestCodeGenerator:
    """Tests for the instruction blocks produced by CodeGenerator."""

    def test_separator(self):
        assert SEPARATOR == "----------------"

    def test_assignment_block(self):
        gen = CodeGenerator()
        gen.emit_assignment("x", "10", "5")
        assert gen.lines == ["LOAD 10", "ADD 5", "STORE x", "----------------"]

    def test_print_block(self):
        gen = CodeGenerator()
        gen.emit_print("x")
        assert gen.lines == ["PUSH x", "CALL PRINT", "----------------"]

    def test_blocks_in_call_order(self):
        gen = CodeGenerator()
        gen.emit_print("a")
        gen.emit_assignment("b", "1", "2")
        assert gen.lines == [
            "PUSH a", "CALL PRINT", "----------------",
            "LOAD 1", "ADD 2", "STORE b", "----------------",
        ]
        assert gen.block_count == 2

    def test_assembly_text(self):
        gen = CodeGenerator()
        gen.emit_print("x")
        assert gen.assembly == "PUSH x\nCALL PRINT\n----------------\n"

    def test_empty_assembly(self):
        gen = CodeGenerator()
        assert gen.assembly == ""
        assert gen.lines == []

    def test_sink_receives_lines_immediately(self):
        received = []
        gen = CodeGenerator(sink=received.append)
        gen.emit_assignment("y", "3", "4")
        assert received == ["LOAD 3", "ADD 4", "STORE y", "----------------"]
        gen.emit_print("y")
        assert received[-3:] == ["PUSH y", "CALL PRINT", "----------------"]

    def test_lines_is_a_copy(self):
        gen = CodeGenerator()
        gen.emit_print("x")
        gen.lines.clear()
        assert len(gen.lines) == 3

    def test_is_an_emitter(self):
        assert isinstance(CodeGenerator(), Emitter)

"""
Tests for the toyc command-line tool
====================================
"""

import pytest
from click.testing import CliRunner

from toyc.cli.toyc import main
from toyc.cli.errors import ExitCode


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "prog.toy"
    path.write_text("x = 10 + 5;\nprint x;\n")
    return path


class TestToycCLI:
    """Tests for the toyc CLI."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Translate a toy program" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_missing_argument(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Usage" in result.output

    def test_nonexistent_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.toy")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_listing_to_stdout(self, runner, program):
        result = runner.invoke(main, [str(program)])
        assert result.exit_code == 0
        assert result.output == (
            "--- Simple Compiler ---\n"
            f"Compiling file: {program}\n"
            "\n"
            "LOAD 10\n"
            "ADD 5\n"
            "STORE x\n"
            "----------------\n"
            "PUSH x\n"
            "CALL PRINT\n"
            "----------------\n"
            "\n"
            "--- Compilation Complete ---\n"
        )

    def test_quiet(self, runner, program):
        result = runner.invoke(main, ["-q", str(program)])
        assert result.exit_code == 0
        assert result.output == (
            "LOAD 10\nADD 5\nSTORE x\n----------------\n"
            "PUSH x\nCALL PRINT\n----------------\n"
        )

    def test_output_file(self, runner, program, tmp_path):
        out = tmp_path / "prog.asm"
        result = runner.invoke(main, [str(program), "-o", str(out)])
        assert result.exit_code == 0
        assert f"Compiled {program} -> {out}" in result.output
        assert out.read_text() == (
            "LOAD 10\nADD 5\nSTORE x\n----------------\n"
            "PUSH x\nCALL PRINT\n----------------\n"
        )

    def test_syntax_error(self, runner, tmp_path):
        """Earlier blocks are printed, then the error; exit code 1."""
        bad = tmp_path / "bad.toy"
        bad.write_text("print x;\ny = 10;\n")
        result = runner.invoke(main, [str(bad)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "PUSH x\nCALL PRINT\n----------------\n" in result.output
        assert "unexpected token ';'" in result.output
        assert "--- Compilation Complete ---" not in result.output

    def test_syntax_error_with_output_file(self, runner, tmp_path):
        """Blocks emitted before the error stay in the output file."""
        bad = tmp_path / "bad.toy"
        bad.write_text("print x;\ny = 10;\n")
        out = tmp_path / "bad.asm"
        result = runner.invoke(main, [str(bad), "-o", str(out)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "unexpected token ';'" in result.output
        assert out.read_text() == "PUSH x\nCALL PRINT\n----------------\n"

    def test_error_in_first_statement_with_output_file(self, runner, tmp_path):
        bad = tmp_path / "bad.toy"
        bad.write_text("print = 1 + 2;")
        out = tmp_path / "bad.asm"
        result = runner.invoke(main, [str(bad), "-o", str(out)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "unexpected token '='" in result.output
        assert out.read_text() == ""

    def test_stray_high_byte(self, runner, tmp_path):
        src = tmp_path / "bytes.toy"
        src.write_bytes(b"\xe9 print x;\n")
        result = runner.invoke(main, ["-q", str(src)])
        assert result.exit_code == 0
        assert result.output == "PUSH x\nCALL PRINT\n----------------\n"

    def test_strict_flag(self, runner, tmp_path):
        src = tmp_path / "stray.toy"
        src.write_text("@ print x;")

        lenient = runner.invoke(main, ["-q", str(src)])
        assert lenient.exit_code == 0
        assert "PUSH x" in lenient.output

        strict = runner.invoke(main, ["-q", "--strict", str(src)])
        assert strict.exit_code == ExitCode.BUILD_ERROR
        assert "unknown token '@'" in strict.output

    def test_max_token_length(self, runner, tmp_path):
        src = tmp_path / "long.toy"
        src.write_text("print abcdefgh;")

        result = runner.invoke(main, ["-q", "--max-token-length", "4", str(src)])
        assert result.exit_code == 0
        assert "PUSH abcd\n" in result.output

        result = runner.invoke(main, ["-q", "--max-token-length", "0", str(src)])
        assert "PUSH abcdefgh\n" in result.output

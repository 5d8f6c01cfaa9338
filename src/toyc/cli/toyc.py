"""
toyc - Toy Compiler Command-Line Interface
==========================================

This module implements the command-line interface for the toy compiler.

Usage Examples
--------------
Print the listing to the terminal:
    $ toyc prog.toy

Write the listing to a file:
    $ toyc prog.toy -o prog.asm

Reject stray characters between statements:
    $ toyc --strict prog.toy
"""

import logging
from pathlib import Path
from typing import Optional

import click

from toyc import __version__
from toyc.compiler import ToyCompiler, CompilerOptions
from toyc.cli.errors import handle_cli_exception


BANNER = "--- Simple Compiler ---"
COMPLETE = "--- Compilation Complete ---"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the listing to this file instead of stdout",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat unrecognized characters between statements as errors",
)
@click.option(
    "--max-token-length",
    type=click.IntRange(min=0),
    default=99,
    show_default=True,
    help="Truncate identifiers and numbers to this many characters (0 = no limit)",
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Omit the banner lines around the listing",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="toyc")
def main(
    input_file: Path,
    output: Optional[Path],
    strict: bool,
    max_token_length: int,
    quiet: bool,
    verbose: bool,
) -> None:
    """
    Translate a toy program into pseudo-assembly.

    INPUT_FILE holds statements of the form `x = 10 + 5;` and `print x;`.

    \b
    Examples:
        toyc prog.toy                # Listing on stdout
        toyc prog.toy -o prog.asm    # Listing to a file
        toyc --strict prog.toy       # Fail on stray characters
    """
    setup_logging(verbose)

    options = CompilerOptions(
        max_token_length=max_token_length or None,
        strict=strict,
    )
    compiler = ToyCompiler(options)

    try:
        if output is not None:
            # Written line by line, so blocks before a syntax error are kept
            with output.open("w", encoding="utf-8") as out:
                result = compiler.compile_file(
                    input_file, sink=lambda line: out.write(line + "\n")
                )
            if verbose:
                click.echo(f"Translated {result.statement_count} statement(s)")
            click.echo(f"Compiled {input_file} -> {output}")
            return

        if not quiet:
            click.echo(BANNER)
            click.echo(f"Compiling file: {input_file}")
            click.echo()

        # Lines are echoed as soon as they are emitted, so everything
        # before a syntax error is still shown.
        compiler.compile_file(input_file, sink=click.echo)

        if not quiet:
            click.echo()
            click.echo(COMPLETE)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()

"""
cscan - C Scanner Command-Line Interface
========================================

Scans a C source file and writes one line per token to a listing file.

Usage Examples
--------------
Basic scan (writes output.txt):
    $ cscan hello.c

With output file:
    $ cscan hello.c -o hello.tokens

To stdout, with line numbers:
    $ cscan -n hello.c -o -

Exit Codes
----------
0 - Success (also when run without arguments: prints usage)
2 - Input or output file cannot be opened
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from cscanner import __version__
from cscanner.cli.errors import ExitCode, handle_cli_exception
from cscanner.output import TokenWriter
from cscanner.scanner import SOURCE_ENCODING, Scanner

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output.txt"


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
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Token listing file ('-' for stdout)",
)
@click.option(
    "-n", "--line-numbers",
    is_flag=True,
    help="Prefix each token with its line number",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cscan")
@click.pass_context
def main(
    ctx: click.Context,
    input_file: Optional[Path],
    output: str,
    line_numbers: bool,
    verbose: bool,
) -> None:
    """
    Scan C source code into a token listing.

    INPUT_FILE is the source file to scan. Each token is written as one
    line, "<CLASS>: <payload>", where CLASS is one of SC, MC, PREP, SPEC,
    REWD, CHAR, STR, FLOT, OPER, IDEN, INTE.

    \b
    Examples:
        cscan hello.c                # Writes output.txt
        cscan hello.c -o hello.tok   # Specify output file
        cscan -n hello.c -o -        # Line numbers, to stdout
    """
    if input_file is None:
        click.echo(ctx.get_usage())
        ctx.exit(ExitCode.SUCCESS)

    setup_logging(verbose)

    try:
        with input_file.open("r", encoding=SOURCE_ENCODING, newline="") as source:
            with click.open_file(output, "w", encoding=SOURCE_ENCODING) as sink:
                logger.debug("Scanning %s -> %s", input_file, output)
                scanner = Scanner(source, str(input_file))
                writer = TokenWriter(sink, line_numbers=line_numbers)
                writer.write_all(scanner.tokenize())
    except Exception as e:
        handle_cli_exception(e, verbose)

    for error in scanner.diagnostics:
        click.echo(str(error), err=True)

    if verbose:
        click.echo(
            f"Scanned {input_file}: {writer.token_count} tokens, "
            f"{writer.error_count} malformed, "
            f"{scanner.diagnostics.error_count()} invalid characters",
            err=True,
        )


if __name__ == "__main__":
    main()

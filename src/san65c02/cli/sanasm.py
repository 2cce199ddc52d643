"""
sanasm - 65C02 SAN Assembler Command-Line Interface
===================================================

This module implements the command-line interface for the SAN assembler.
It assembles a SAN source file into raw 65C02 machine code with no header
or wrapper.

Usage Examples
--------------
Basic assembly (writes hello.bin):
    $ sanasm hello.san

With output file and origin:
    $ sanasm hello.san -o hello.bin --origin 0x0800

Reject out-of-range operands and branches:
    $ sanasm --checked hello.san

Environment variables SAN65_ORIGIN, SAN65_TABLE_BASE and SAN65_CHECKED
set defaults; command-line options override them.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from san65c02 import __version__
from san65c02.assembler import AssemblySession, SanAssembler, StreamSink
from san65c02.cli.errors import handle_cli_exception
from san65c02.config import AssemblerConfig, parse_address


def _address_option(value: Optional[str], name: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return parse_address(value)
    except ValueError:
        raise click.BadParameter(
            f"invalid address '{value}' (use $hex, 0xhex or decimal, 0-65535)",
            param_hint=name,
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
    help="Output binary file (default: input.bin)",
)
@click.option(
    "-a", "--origin",
    type=str,
    default=None,
    help="Address of the first byte ($hex, 0xhex or decimal). Default: 0",
)
@click.option(
    "--table-base",
    type=str,
    default=None,
    help="Address of the opcode dispatch table. Default: 0",
)
@click.option(
    "--checked/--unchecked",
    default=None,
    help="Validate operand ranges and branch distances. Default: unchecked",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="sanasm")
def main(
    input_file: Path,
    output: Optional[Path],
    origin: Optional[str],
    table_base: Optional[str],
    checked: Optional[bool],
    verbose: bool,
) -> None:
    """
    Assemble 65C02 SAN source into raw machine code.

    INPUT_FILE is the SAN source file to assemble.

    \b
    Examples:
        sanasm hello.san                  # Outputs hello.bin
        sanasm hello.san -o out.bin       # Specify output file
        sanasm -a '$0800' hello.san       # Assemble for $0800

    SAN reference: https://github.com/scotws/SAN
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = AssemblerConfig.from_env()
    try:
        if (value := _address_option(origin, "--origin")) is not None:
            config.origin = value
        if (value := _address_option(table_base, "--table-base")) is not None:
            config.table_base = value
    except click.BadParameter as e:
        handle_cli_exception(e, verbose=verbose)
    if checked is not None:
        config.checked = checked

    output_file = output if output is not None else input_file.with_suffix(".bin")
    if output_file.resolve() == input_file.resolve():
        handle_cli_exception(
            click.BadParameter(
                f"output file would overwrite the input file '{input_file}'",
                param_hint="--output",
            ),
            verbose=verbose,
        )

    if verbose:
        click.echo(f"Assembling {input_file}...")
        click.echo(f"Origin: ${config.origin:04X}")
        click.echo(f"Checked mode: {'enabled' if config.checked else 'disabled'}")

    sink = None
    try:
        source = input_file.read_text(encoding="utf-8")
        with output_file.open("wb") as stream:
            sink = StreamSink(stream, origin=config.origin)
            session = AssemblySession.from_config(config, sink=sink)
            SanAssembler(session).assemble(source, filename=str(input_file))
    except Exception as e:
        # Don't leave a truncated binary behind
        if sink is not None:
            output_file.unlink(missing_ok=True)
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")

    if verbose:
        click.echo(f"Wrote {sink.size} bytes to {output_file}")
        click.echo(f"Assembly complete: ${config.origin:04X}-${sink.here():04X}")


if __name__ == "__main__":
    main()

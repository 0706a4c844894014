#!/usr/bin/env python3
"""Command-line front end for alarmscript using Typer."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from . import __version__  # type: ignore
from .addressing import expand
from .builder import default_filename, generate as generate_script
from .clipboard import copy_to_clipboard, find_clipboard_command
from .errors import ClipboardError
from .types import AddressType, GeneratedScript

app = typer.Typer(
    name="alarmscript",
    help="Generate PLC alarm-logging control scripts from 'OpName: addresses' lines.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Shared options and helpers
# ============================================================================

MachineOption = Annotated[
    str,
    typer.Option("--machine", "-m", help="Machine name used as identifier prefix", envvar="ALARMSCRIPT_MACHINE"),
]
DefaultTypeOption = Annotated[
    str,
    typer.Option(
        "--default-type",
        "-t",
        help="Address type for entries without a prefix: CIO, W, D or H",
        envvar="ALARMSCRIPT_DEFAULT_TYPE",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Output as JSON"),
]


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbose flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if not verbose else "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def resolve_default_type(value: str) -> AddressType:
    """Parse the --default-type option, exiting with code 2 on bad input."""
    try:
        return AddressType.parse(value)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


def read_operation_text(source: Optional[str], ops: Optional[list[str]]) -> str:
    """
    Collect the operation lines from --op options, a file, or stdin.

    --op values take precedence; SOURCE of '-' or no SOURCE reads stdin.
    """
    if ops:
        return "\n".join(ops)
    if source is None or source == "-":
        return sys.stdin.read().lstrip("\ufeff")
    path = Path(source)
    if not path.is_file():
        typer.echo(f"Error: Operation file not found: {path}", err=True)
        raise typer.Exit(2)
    try:
        # utf-8-sig drops the BOM Notepad writes
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error: Could not read operation file: {e}", err=True)
        raise typer.Exit(2)


def script_to_dict(result: GeneratedScript, machine: str, default_type: AddressType) -> dict:
    return {
        "machine": machine,
        "default_type": default_type.value,
        "script": result.text,
        "operations": [
            {
                "name": op.block.name,
                "addresses": [t.tag for t in op.expansion.tokens],
                "invalid_entries": list(op.expansion.invalid_entries),
            }
            for op in result.operations
        ],
        "warnings": result.warnings,
    }


# ============================================================================
# Commands
# ============================================================================

@app.command()
def generate(
    source: Annotated[
        Optional[str],
        typer.Argument(help="File with one 'OpName: addresses' per line ('-' or omitted reads stdin)"),
    ] = None,
    machine: MachineOption = "",
    default_type: DefaultTypeOption = "CIO",
    op: Annotated[
        Optional[list[str]],
        typer.Option("--op", help="Operation line, e.g. 'Op115: CIO4012-4019, W4021' (repeatable)"),
    ] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the script to this file")] = None,
    save: Annotated[
        bool,
        typer.Option("--save", help="Write the script to '<machine>.txt' (or alarm_script.txt)"),
    ] = False,
    copy: Annotated[bool, typer.Option("--copy", help="Also copy the script to the clipboard")] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 when address entries were skipped"),
    ] = False,
    verbose: VerboseOption = False,
    json_output: JsonOption = False,
) -> None:
    """
    Generate the alarm script for a machine.

    Each input line is 'OpName: addresses' where addresses is a comma list of
    CIO4012, W4021-4024 or 4030 (uses --default-type). Lines without exactly one
    colon are ignored. Skipped address entries are reported on stderr.
    """
    setup_logging(verbose)
    area = resolve_default_type(default_type)
    text = read_operation_text(source, op)

    try:
        result = generate_script(machine, text, area)

        if json_output:
            typer.echo(json.dumps(script_to_dict(result, machine, area), indent=2))
        else:
            for warning in result.warnings:
                typer.echo(f"Warning: {warning}", err=True)

        target: Path | None = output
        if target is None and save:
            target = Path(default_filename(machine))
        if target is not None:
            target.write_text(result.text, encoding="utf-8")
            if not json_output:
                typer.echo(f"OK: Wrote {target}")
        elif not json_output:
            typer.echo(result.text)

        if copy:
            tool = copy_to_clipboard(result.text)
            logger.debug("Clipboard tool used: %s", tool)
            typer.echo("OK: Copied script to clipboard", err=json_output)
    except ClipboardError as e:
        typer.echo(f"Error: Clipboard: {e}", err=True)
        raise typer.Exit(3)
    except OSError as e:
        typer.echo(f"Error: Could not write script: {e}", err=True)
        raise typer.Exit(2)
    except Exception as e:
        typer.echo(f"Error: Unexpected error: {e}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        raise typer.Exit(4)

    if strict and result.warnings:
        raise typer.Exit(1)


@app.command(name="expand")
def expand_command(
    spec: Annotated[str, typer.Argument(help="Address list, e.g. 'CIO4012-4019, W4021, 4030'")],
    default_type: DefaultTypeOption = "CIO",
    verbose: VerboseOption = False,
    json_output: JsonOption = False,
) -> None:
    """
    Show the addresses an address list expands to.

    Does not generate a script; useful for checking ranges before generating.
    """
    setup_logging(verbose)
    area = resolve_default_type(default_type)

    result = expand(spec, area)
    if json_output:
        typer.echo(
            json.dumps(
                {
                    "addresses": [t.tag for t in result.tokens],
                    "invalid_entries": list(result.invalid_entries),
                },
                indent=2,
            )
        )
        return

    warning = result.warning_message()
    if warning:
        typer.echo(f"Warning: {warning}", err=True)
    for token in result.tokens:
        typer.echo(token.tag)


@app.command()
def info(
    verbose: VerboseOption = False,
    json_output: JsonOption = False,
) -> None:
    """Show package version, supported address types and the clipboard tool in use."""
    setup_logging(verbose)

    clipboard_cmd = find_clipboard_command()
    info_data = {
        "version": __version__,
        "address_types": [t.value for t in AddressType],
        "clipboard": clipboard_cmd[0] if clipboard_cmd else None,
    }

    if json_output:
        typer.echo(json.dumps(info_data, indent=2))
    else:
        typer.echo(f"alarmscript version: {info_data['version']}")
        typer.echo(f"Address types: {', '.join(info_data['address_types'])}")
        typer.echo(f"Clipboard tool: {info_data['clipboard'] or 'none found'}")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"alarmscript {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """alarmscript - Generate PLC alarm-logging control scripts."""
    pass


if __name__ == "__main__":
    app()

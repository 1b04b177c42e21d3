"""Demo application entry point for sample-helper.

``sample-helper [flags] [anything else]`` parses its arguments into
:class:`DemoSettings`, optionally asks for the remaining values
interactively, and prints the resulting settings together with every
unresolved argument.  Run without arguments, it prints the argument help
first.

This module is the **sole error boundary** for the demo.  It catches
:class:`~sample_helper.exceptions.SampleHelperError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.
"""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from sample_helper.cli import exit_codes
from sample_helper.cli.console import console
from sample_helper.core.arguments import Argument, define_arguments
from sample_helper.core.conversion import convert_value
from sample_helper.core.help import format_value
from sample_helper.core.tokens import match_flag
from sample_helper.exceptions import SampleHelperError, ValueConversionError
from sample_helper.logging_setup import configure_logging
from sample_helper.version import __version__

APPLICATION_NAME = "sample-helper"


class Mode(enum.Enum):
    COPY = "copy"
    MOVE = "move"
    LIST = "list"


# ---------------------------------------------------------------------------
# Demo configuration
# ---------------------------------------------------------------------------

@dataclass
class DemoSettings:
    """Settings filled from the command line."""

    source: str = "."
    output: Path | None = None
    mode: Mode = Mode.LIST
    count: int = 10
    ratio: float = 1.0
    verbose: bool = False
    debug: bool = False
    interactive: bool = False
    banner: bool = False


DEMO_ARGUMENTS = define_arguments(
    DemoSettings,
    Argument(
        "source",
        short_name="src",
        description="The directory to fetch the data from",
        category="I/O flags",
    ),
    Argument(
        "output",
        short_name="o",
        description="Where results are written",
        category="I/O flags",
        value_type=Path,
    ),
    Argument(
        "mode",
        short_name="m",
        description="One of copy, move, list",
        value_type=Mode,
    ),
    Argument("count", short_name="n", description="Items to process", value_type=int),
    Argument("ratio", description="Sampling ratio", value_type=float),
    Argument(
        "verbose",
        short_name="v",
        description="Print every setting",
        category="Output",
        value_type=bool,
    ),
    Argument(
        "debug",
        description="Enable debug logging",
        category="Output",
        value_type=bool,
    ),
    Argument(
        "interactive",
        short_name="i",
        description="Ask for each value",
        value_type=bool,
    ),
    Argument(
        "banner",
        description="Show the application banner",
        category="Output",
        value_type=bool,
    ),
)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def _wants_debug(argv: list[str]) -> bool:
    """Look for an enabled ``--debug`` switch before the real parse.

    Logging has to be configured first so the parser's own debug
    records reach the handler.
    """
    debug = DEMO_ARGUMENTS.find("debug", short=False)
    enabled = False
    for raw in argv:
        token = match_flag(raw)
        if token is None or DEMO_ARGUMENTS.find(token.name, short=token.is_short) is not debug:
            continue
        if token.value is None:
            enabled = True
            continue
        try:
            enabled = convert_value(token.value, bool)
        except ValueConversionError:
            continue
    return enabled


def main(argv: list[str] | None = None) -> int:
    """Run the sample-helper demo.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    SystemExit
        When ``--help`` is given.
    """
    from sample_helper.cli.command_line import parse_command_line, print_help

    if argv is None:
        argv = sys.argv[1:]

    configure_logging(logging.DEBUG if _wants_debug(argv) else None)

    settings = DemoSettings()
    if not argv:
        print_help(settings, table=DEMO_ARGUMENTS)
    unresolved = parse_command_line(settings, argv, table=DEMO_ARGUMENTS)

    if settings.banner:
        from sample_helper.cli.chrome import display_header

        display_header(APPLICATION_NAME, f"version {__version__}")

    if settings.interactive:
        from sample_helper.cli.prompts import fill_from_user_input

        fill_from_user_input(settings, table=DEMO_ARGUMENTS)

    defaults = DemoSettings()
    console.action("Settings:")
    for argument in DEMO_ARGUMENTS:
        value = argument.get(settings)
        if settings.verbose or value != argument.get(defaults):
            console.result(argument.name, None if value is None else format_value(value))

    if unresolved:
        console.action("Unresolved arguments:")
        for index, token in enumerate(unresolved, start=1):
            console.result(f"#{index}", token)

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SampleHelperError as exc:
        console.error(f"Error: {exc}")
        if exc.hint:
            console.warning(f"Hint: {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.write_line()
        console.warning("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

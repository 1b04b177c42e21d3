"""Console-bound front end for :func:`sample_helper.core.parser.parse_arguments`."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any

from sample_helper.cli.console import StyledConsole, console
from sample_helper.core.arguments import ArgumentTable, table_for
from sample_helper.core.help import generate_help
from sample_helper.core.parser import parse_arguments


def parse_command_line(
    configuration: Any,
    argv: Iterable[str] | None = None,
    *,
    table: ArgumentTable | None = None,
    out: StyledConsole = console,
) -> list[str]:
    """Parse *argv* (default ``sys.argv[1:]``) into *configuration*.

    Help and per-argument errors are written to *out*.  Returns the
    unresolved arguments.
    """
    if argv is None:
        argv = sys.argv[1:]
    return parse_arguments(configuration, argv, output=out, table=table)


def print_help(
    configuration: Any,
    *,
    table: ArgumentTable | None = None,
    out: StyledConsole = console,
) -> None:
    """Write the generated argument help for *configuration* to *out*."""
    if table is None:
        table = table_for(type(configuration))
    for line in generate_help(table, configuration):
        out.action(line)

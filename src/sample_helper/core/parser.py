"""Command-line parsing into a configuration object.

Tokens are processed left to right:

1. Tokens that are not flags are collected as *unresolved* and returned.
2. Flags are resolved against the configuration's argument table:
   ``-x`` by short name, ``--name`` by full name, case-insensitive.
3. The value is converted to the argument's declared type and assigned.

Unknown flags and bad values are reported through the diagnostic sink
and skipped; they never abort the parse.  ``help`` prints the generated
help and exits unless the table itself defines a ``help`` argument.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import Any, Final

from sample_helper.core.arguments import Argument, ArgumentTable, table_for
from sample_helper.core.conversion import convert_value
from sample_helper.core.help import generate_help
from sample_helper.core.protocols import DiagnosticSink
from sample_helper.core.tokens import FlagToken, match_flag
from sample_helper.exceptions import ValueConversionError, type_label

logger = logging.getLogger(__name__)

HELP_FLAG: Final[str] = "help"


def parse_arguments(
    configuration: Any,
    args: Iterable[str],
    *,
    output: DiagnosticSink,
    table: ArgumentTable | None = None,
) -> list[str]:
    """Apply *args* to *configuration* in place.

    Parameters
    ----------
    configuration:
        Object whose attributes are described by an argument table.
    args:
        Raw tokens, usually ``sys.argv[1:]``.
    output:
        Receives help lines and per-token error messages.
    table:
        Explicit table.  When ``None``, the table registered for
        ``type(configuration)`` is used.

    Returns
    -------
    list[str]
        Tokens that did not match the flag grammar, in original order.

    Raises
    ------
    ArgumentDefinitionError
        When no table is registered for the configuration type.
    SystemExit
        After printing help, when no argument is named ``help``.
    """
    if table is None:
        table = table_for(type(configuration))

    unresolved: list[str] = []
    for raw in args:
        token = match_flag(raw)
        if token is None:
            logger.debug("Unresolved argument %r", raw)
            unresolved.append(raw)
            continue

        argument = table.find(token.name, short=token.is_short)

        if token.name == HELP_FLAG:
            for line in generate_help(table, configuration):
                output.action(line)
            if argument is None:
                logger.debug("Help requested; exiting")
                sys.exit(0)
        elif argument is None:
            output.error(f"Unknown argument: {token.display}")
            continue

        _assign(configuration, argument, token, output)

    return unresolved


def _assign(
    configuration: Any,
    argument: Argument,
    token: FlagToken,
    output: DiagnosticSink,
) -> None:
    """Convert and store the token's value, reporting failures."""
    if token.value is None:
        if not argument.is_flag:
            _report_type_error(argument, token, output)
            return
        value: Any = True
    else:
        try:
            value = convert_value(token.value, argument.value_type)
        except ValueConversionError as exc:
            logger.debug("Conversion failed for %s: %s", token.display, exc)
            _report_type_error(argument, token, output)
            return

    argument.set(configuration, value)
    logger.debug("Set %s = %r", argument.attribute, value)


def _report_type_error(
    argument: Argument,
    token: FlagToken,
    output: DiagnosticSink,
) -> None:
    output.error(
        f"Argument '{token.name}' requires a value of the type "
        f"'{type_label(argument.value_type)}'."
    )

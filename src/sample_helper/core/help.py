"""Help text generation for an argument table.

Pure: the output depends only on the table and the configuration's
current values.  Rendering (colors, output stream) is the caller's job.

Example output::

    Arguments:
       -v, --verbose           Print more output

     I/O flags
       -src, --source=[.]      The directory to fetch the data from

"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from itertools import groupby
from typing import Any, Final

from sample_helper.core.arguments import Argument, ArgumentTable

HELP_HEADER: Final[str] = "Arguments:"
KEYWORD_COLUMN_WIDTH: Final[int] = 20
NO_VALUE_PLACEHOLDER: Final[str] = ".."


def format_value(value: Any) -> str:
    """Render a current value for help and result output."""
    if value is None:
        return NO_VALUE_PLACEHOLDER
    if isinstance(value, enum.Enum):
        return value.name.lower()
    return str(value)


def format_argument_help(argument: Argument, value: Any) -> str:
    """Render a single help line without indentation.

    ``-s, --source=[value]`` padded to the keyword column, followed by
    the description.  Boolean switches carry no ``=[...]`` suffix.
    """
    keywords: list[str] = []
    if argument.short_name:
        keywords.append(f"-{argument.short_name}")
    keywords.append(f"--{argument.name}")

    assignment = ""
    if not argument.is_flag:
        assignment = f"=[{format_value(value)}]"

    left = (", ".join(keywords) + assignment).ljust(KEYWORD_COLUMN_WIDTH)
    return f"{left}  {argument.description or ''}".rstrip()


def _category_key(argument: Argument) -> str:
    return argument.category or ""


def generate_help(table: ArgumentTable, configuration: Any) -> Iterator[str]:
    """Yield the help lines for every argument in *table*.

    Arguments are sorted by name, grouped by category, and categories are
    sorted by label with the uncategorized group first.  Each group ends
    with a blank line.
    """
    yield HELP_HEADER

    by_name = sorted(table, key=lambda arg: arg.name.casefold())
    by_category = sorted(by_name, key=_category_key)
    for category, arguments in groupby(by_category, key=_category_key):
        if category:
            yield f" {category}"
        for argument in arguments:
            yield "   " + format_argument_help(argument, argument.get(configuration))
        yield ""

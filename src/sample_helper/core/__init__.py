"""Core layer: argument tables, parsing, help generation, text helpers.

Rules
-----
* No ``print()`` calls; diagnostics go through a :class:`DiagnosticSink`.
* No imports from ``cli``.
"""

from sample_helper.core.arguments import (
    Argument,
    ArgumentTable,
    define_arguments,
    table_for,
)
from sample_helper.core.conversion import convert_value
from sample_helper.core.help import generate_help
from sample_helper.core.parser import parse_arguments
from sample_helper.core.protocols import DiagnosticSink
from sample_helper.core.text import exception_to_html, trim_length, trim_start

__all__: list[str] = [
    "Argument",
    "ArgumentTable",
    "DiagnosticSink",
    "convert_value",
    "define_arguments",
    "exception_to_html",
    "generate_help",
    "parse_arguments",
    "table_for",
    "trim_length",
    "trim_start",
]

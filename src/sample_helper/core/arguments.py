"""Argument descriptors and per-type argument tables.

A configuration type declares its command-line surface explicitly::

    @dataclass
    class Settings:
        source: str = "."
        verbose: bool = False

    define_arguments(
        Settings,
        Argument("source", short_name="src", description="Input folder"),
        Argument("verbose", short_name="v", value_type=bool),
    )

The resulting :class:`ArgumentTable` is built once per type and cached.
Ambiguous tables are rejected at definition time, so lookups during
parsing always resolve to at most one argument.  So are switches whose
class default is a ``bool`` but whose ``value_type`` was left at ``str``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from sample_helper.exceptions import ArgumentDefinitionError, type_label

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


# ---------------------------------------------------------------------------
# Single argument descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Argument:
    """Command-line metadata for one attribute of a configuration object."""

    name: str
    """Full flag name, e.g. ``"source-directory"`` for ``--source-directory``."""

    short_name: str | None = None
    """Optional abbreviation, e.g. ``"src"`` for ``-src``."""

    description: str | None = None
    """Help text shown next to the flag."""

    category: str | None = None
    """Grouping label for the help output, e.g. ``"I/O flags"``."""

    value_type: type = str
    """Declared type the string value is converted to."""

    attr: str | None = None
    """Attribute read and written on the configuration object.

    Defaults to :attr:`name` with dashes replaced by underscores.
    """

    getter: Getter | None = field(default=None, compare=False)
    setter: Setter | None = field(default=None, compare=False)

    @property
    def attribute(self) -> str:
        """Resolved attribute name on the configuration object."""
        return self.attr or self.name.replace("-", "_")

    @property
    def is_flag(self) -> bool:
        """``True`` when the argument is a presence-only boolean switch."""
        return self.value_type is bool

    @property
    def display_name(self) -> str:
        """Label used when prompting for this argument interactively."""
        return self.description or self.name

    def get(self, configuration: Any) -> Any:
        """Read the current value from *configuration*."""
        if self.getter is not None:
            return self.getter(configuration)
        return getattr(configuration, self.attribute, None)

    def set(self, configuration: Any, value: Any) -> None:
        """Write *value* to *configuration*."""
        if self.setter is not None:
            self.setter(configuration, value)
        else:
            setattr(configuration, self.attribute, value)

    def matches(self, token_name: str, *, short: bool) -> bool:
        """Case-insensitive match against the short or the full name."""
        candidate = self.short_name if short else self.name
        return candidate is not None and candidate.casefold() == token_name.casefold()


# ---------------------------------------------------------------------------
# Table of arguments for one configuration type
# ---------------------------------------------------------------------------

class ArgumentTable:
    """Immutable, validated collection of :class:`Argument` entries."""

    def __init__(self, config_type: type, arguments: tuple[Argument, ...]) -> None:
        _validate(config_type, arguments)
        self.config_type: type = config_type
        self.arguments: tuple[Argument, ...] = arguments

    def __iter__(self) -> Iterator[Argument]:
        return iter(self.arguments)

    def __len__(self) -> int:
        return len(self.arguments)

    def __repr__(self) -> str:
        names = ", ".join(arg.name for arg in self.arguments)
        return f"ArgumentTable({self.config_type.__name__}: {names})"

    def find(self, token_name: str, *, short: bool) -> Argument | None:
        """Return the argument matching *token_name*, or ``None``."""
        for argument in self.arguments:
            if argument.matches(token_name, short=short):
                return argument
        return None


def _validate(config_type: type, arguments: tuple[Argument, ...]) -> None:
    """Reject empty names, case-insensitive duplicates and untyped switches."""
    seen_names: dict[str, str] = {}
    seen_short: dict[str, str] = {}
    for argument in arguments:
        if not argument.name or argument.name.startswith("-"):
            raise ArgumentDefinitionError(
                f"Invalid argument name {argument.name!r} on {config_type.__name__}.",
                hint="Names are given without leading dashes.",
            )
        key = argument.name.casefold()
        if key in seen_names:
            raise ArgumentDefinitionError(
                f"Duplicate argument name '--{argument.name}' on "
                f"{config_type.__name__} (already used by '--{seen_names[key]}').",
            )
        seen_names[key] = argument.name

        if argument.short_name:
            short_key = argument.short_name.casefold()
            if short_key in seen_short:
                raise ArgumentDefinitionError(
                    f"Duplicate short name '-{argument.short_name}' on "
                    f"{config_type.__name__} (already used by '--{seen_short[short_key]}').",
                )
            seen_short[short_key] = argument.name

        if argument.getter is None and not argument.is_flag:
            default = getattr(config_type, argument.attribute, None)
            if isinstance(default, bool):
                raise ArgumentDefinitionError(
                    f"Argument '--{argument.name}' on {config_type.__name__} "
                    f"defaults to a bool but is declared as "
                    f"'{type_label(argument.value_type)}'.",
                    hint="Pass value_type=bool for on/off switches.",
                )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_TABLES: dict[type, ArgumentTable] = {}


def define_arguments(config_type: type, *arguments: Argument) -> ArgumentTable:
    """Build, validate and register the argument table for *config_type*.

    Redefining a type replaces its previous table.

    Raises
    ------
    ArgumentDefinitionError
        When two arguments share a name or a short name, or when a
        switch with a ``bool`` default is not declared ``value_type=bool``.
    """
    table = ArgumentTable(config_type, tuple(arguments))
    _TABLES[config_type] = table
    return table


def table_for(config_type: type) -> ArgumentTable:
    """Return the registered table for *config_type* or one of its bases."""
    for klass in getattr(config_type, "__mro__", (config_type,)):
        table = _TABLES.get(klass)
        if table is not None:
            return table
    raise ArgumentDefinitionError(
        f"No arguments are defined for {config_type.__name__}.",
        hint="Call define_arguments() for the configuration type first.",
    )

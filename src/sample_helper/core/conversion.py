"""Generic string-to-type conversion for argument values and prompts.

Every function in this module is a pure transformation.  Failures are
raised as :class:`~sample_helper.exceptions.ValueConversionError` so
callers can report the flag name and expected type.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any, Final

from sample_helper.exceptions import ValueConversionError

TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "yes", "y", "on", "1"})
FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "no", "n", "off", "0"})


def to_bool(value: str) -> bool:
    """Parse a boolean word (``true``/``false``, ``yes``/``no``, ...)."""
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueConversionError(value, bool, hint="Use true or false.")


def to_enum(value: str, enum_type: type[enum.Enum]) -> enum.Enum:
    """Resolve an enum member by name (case-insensitive), then by value."""
    wanted = value.strip().casefold()
    for member in enum_type:
        if member.name.casefold() == wanted:
            return member
    for member in enum_type:
        if str(member.value).casefold() == wanted:
            return member
    choices = ", ".join(member.name.lower() for member in enum_type)
    raise ValueConversionError(value, enum_type, hint=f"Choose one of: {choices}.")


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    bool: to_bool,
    str: str,
}


def convert_value(value: str, target_type: type) -> Any:
    """Convert *value* to *target_type*.

    ``bool`` and ``Enum`` subclasses get word-aware parsing; every other
    type is called with the string (``int``, ``float``, ``pathlib.Path``,
    ``decimal.Decimal``, ...).

    Raises
    ------
    ValueConversionError
        When the target type rejects the string.
    """
    converter = _CONVERTERS.get(target_type)
    if converter is not None:
        return converter(value)

    if isinstance(target_type, type) and issubclass(target_type, enum.Enum):
        return to_enum(value, target_type)

    try:
        return target_type(value)
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise ValueConversionError(value, target_type) from exc

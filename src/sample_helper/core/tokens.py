"""Classification of raw command-line tokens.

A token is a *flag* when it matches ``-name`` or ``--name[=value]``;
anything else (including ``-``, ``--`` and ``---x``) is left for the
caller as an unresolved argument.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_FLAG_PATTERN = re.compile(r"^-[-]?([^-][^=]*)(=(.*))?$", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True, slots=True)
class FlagToken:
    """A token that matched the flag grammar."""

    raw: str
    name: str
    value: str | None
    """Inline value after ``=``; ``None`` when no ``=`` was given."""

    is_short: bool
    """``True`` for ``-name``, ``False`` for ``--name``."""

    @property
    def prefix(self) -> str:
        return "-" if self.is_short else "--"

    @property
    def display(self) -> str:
        """The flag as typed, without its value (e.g. ``--alpha``)."""
        return f"{self.prefix}{self.name}"


def match_flag(token: str) -> FlagToken | None:
    """Return a :class:`FlagToken` for *token*, or ``None`` if it is not a flag."""
    match = _FLAG_PATTERN.match(token)
    if match is None:
        return None
    return FlagToken(
        raw=token,
        name=match.group(1),
        value=match.group(3) if match.group(2) is not None else None,
        is_short=not token.startswith("--"),
    )

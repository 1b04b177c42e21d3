"""Protocols (interfaces) consumed by the core layer.

Core code reports diagnostics through these contracts and never imports
the concrete console from ``cli``.
"""

from __future__ import annotations

from typing import Protocol


class DiagnosticSink(Protocol):
    """Destination for parser diagnostics and help output.

    :class:`~sample_helper.cli.console.StyledConsole` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def action(self, text: str) -> None:
        """Write a neutral, highlighted line (used for help output)."""
        ...  # pragma: no cover

    def error(self, text: str) -> None:
        """Write an error line."""
        ...  # pragma: no cover

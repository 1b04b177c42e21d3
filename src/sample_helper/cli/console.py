"""Styled console output with optional Rich support.

Text is written with a *semantic tag* (``info``, ``action``, ``error``,
...) instead of embedded color codes; the tag-to-color mapping lives in
:data:`THEME_STYLES`.  Markup is never interpreted, so user strings such
as ``=[value]`` print verbatim.

This module intentionally avoids module-level imports of Rich so
bootstrap paths keep working when it is not installed: output then
falls back to plain ``print``.
"""

from __future__ import annotations

import sys
from typing import Any, Literal, TextIO

from sample_helper.exceptions import EnvironmentError

Tag = Literal[
    "info",
    "action",
    "result",
    "value",
    "prompt",
    "warning",
    "error",
    "muted",
    "header",
]

THEME_STYLES: dict[str, str] = {
    "info": "bright_white",
    "action": "yellow",
    "result": "green",
    "value": "bright_white",
    "prompt": "grey70",
    "warning": "dark_orange",
    "error": "red",
    "muted": "bright_black",
    "header": "bold cyan",
}


def _load_rich() -> tuple[type[Any], type[Any], type[Any]]:
    """Return ``(Console, Theme, Text)`` from Rich or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
        from rich.text import Text
        from rich.theme import Theme
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console, Theme, Text


class StyledConsole:
    """Tag-based writer targeting stdout (or an explicit stream).

    A fresh Rich console is created per call so that the current
    ``sys.stdout`` is always honoured (pytest's ``capsys`` relies on it).
    """

    def __init__(self, file: TextIO | None = None) -> None:
        self._file = file

    # -- low level ----------------------------------------------------------

    def get_rich_console(self) -> Any:
        """Create a themed Rich console or raise ``EnvironmentError``."""
        console_class, theme_class, _ = _load_rich()
        return console_class(
            file=self._file,
            theme=theme_class(THEME_STYLES),
            soft_wrap=True,
            highlight=False,
        )

    def write(self, text: str, tag: Tag = "info", *, end: str = "") -> None:
        """Write *text* in the style of *tag* without a trailing newline."""
        self.write_segments((text, tag), end=end)

    def write_line(self, text: str = "", tag: Tag = "info") -> None:
        """Write *text* in the style of *tag* followed by a newline."""
        self.write_segments((text, tag), end="\n")

    def write_segments(self, *segments: tuple[str, Tag], end: str = "\n") -> None:
        """Write several differently styled pieces on one line."""
        try:
            rich_console = self.get_rich_console()
        except EnvironmentError:
            plain = "".join(text for text, _ in segments)
            print(plain, end=end, file=self._file or sys.stdout)
            return
        _, _, text_class = _load_rich()
        rich_console.print(text_class.assemble(*segments), end=end)

    def clear(self) -> None:
        """Clear the terminal when Rich is available and attached to one."""
        try:
            self.get_rich_console().clear()
        except EnvironmentError:
            return

    def render(self, renderable: Any) -> None:
        """Print an arbitrary Rich renderable (tables, panels)."""
        self.get_rich_console().print(renderable)

    # -- semantic helpers ---------------------------------------------------

    def info(self, text: str) -> None:
        self.write_line(f" {text}", "info")

    def action(self, text: str) -> None:
        """Write an action statement, e.g. ``Fetching data...``."""
        self.write_line(f" {text}", "action")

    def warning(self, text: str) -> None:
        self.write_line(f" {text}", "warning")

    def error(self, text: str) -> None:
        """Write an error line."""
        self.write_line(f" {text}", "error")

    def result(self, name: str, value: object) -> None:
        """Write a ``name: value`` result line.

        ``None`` renders as ``<null>`` and empty strings as ``<empty>``.
        """
        shown = "<null>" if value is None else str(value)
        if not shown:
            shown = "<empty>"
        self.write_segments((f"   {name}: ", "result"), (shown, "value"))


console = StyledConsole()

"""Application chrome: banner, exit helper, and the unhandled-error hook."""

from __future__ import annotations

import logging
import sys
import traceback
from types import TracebackType

from sample_helper.cli import exit_codes
from sample_helper.cli.console import StyledConsole, console
from sample_helper.exceptions import EnvironmentError

logger = logging.getLogger(__name__)


def _import_rich_panel() -> tuple[type, type]:
    """Import rich panel and text lazily for the banner."""
    try:
        from rich.panel import Panel
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Panel, Text


def display_header(
    application_name: str,
    copyright_line: str | None = None,
    *,
    out: StyledConsole = console,
) -> None:
    """Clear the screen and show the application banner.

    The copyright line sits below the name inside the panel, so the
    panel always grows to fit the longer of the two.

    Raises
    ------
    ValueError
        If *application_name* is empty.
    """
    if not application_name:
        raise ValueError("application_name must not be empty")

    panel_class, text_class = _import_rich_panel()

    body = text_class(justify="center")
    body.append(application_name, style="header")
    if copyright_line:
        body.append("\n")
        body.append(copyright_line, style="muted")

    out.clear()
    out.render(
        panel_class.fit(
            body,
            border_style="result",
            padding=(1, 4),
        )
    )
    out.write_line()


def exit_application(code: int = exit_codes.SUCCESS) -> None:
    """Terminate the application with *code*."""
    logger.debug("Exiting with code %d", code)
    sys.exit(code)


# ---------------------------------------------------------------------------
# Unhandled exception hook
# ---------------------------------------------------------------------------

def _wait_for_key() -> None:
    from sample_helper.cli.prompts import _import_questionary

    _import_questionary().press_any_key_to_continue(
        " Press any key to display the stacktrace",
    ).ask()


def handle_unhandled_exception(
    exc_type: type[BaseException],
    exc: BaseException,
    tb: TracebackType | None,
    *,
    pause: bool = True,
    out: StyledConsole = console,
) -> None:
    """Report an exception that escaped the application, then exit.

    The traceback is written to the console once and is not logged.
    Exits with :data:`exit_codes.UNEXPECTED_ERROR`.
    """
    logger.debug("Unhandled %s reported on the console", exc_type.__name__)

    out.write_line()
    out.error("An error has occurred:")
    out.write_line(f"    {str(exc) or '<unknown error>'}", "error")
    out.write_line()

    if pause:
        _wait_for_key()
        out.write_line()

    out.write_line("".join(traceback.format_exception(exc_type, exc, tb)), "prompt")

    if pause:
        from sample_helper.cli.prompts import press_any_key_to_exit

        press_any_key_to_exit(out=out)

    sys.exit(exit_codes.UNEXPECTED_ERROR)


def enable_exception_handling(*, pause: bool = True) -> None:
    """Install :func:`handle_unhandled_exception` as ``sys.excepthook``.

    ``KeyboardInterrupt`` still goes to the previous hook.
    """
    previous_hook = sys.excepthook

    def _hook(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            previous_hook(exc_type, exc, tb)
            return
        handle_unhandled_exception(exc_type, exc, tb, pause=pause)

    sys.excepthook = _hook

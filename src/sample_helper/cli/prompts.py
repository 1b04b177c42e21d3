"""Interactive prompts built on questionary.

This module is responsible for:

* Asking for single typed values, re-prompting on invalid input.
* Filling every registered argument of a configuration object.
* Offering a list of options and running the chosen one.
* Yes/no confirmation and "press a key" pauses.

Cancelling a prompt (Ctrl+C / Esc makes questionary return ``None``)
raises :class:`~sample_helper.exceptions.PromptCancelledError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from sample_helper.cli.console import StyledConsole, console
from sample_helper.core.arguments import ArgumentTable, table_for
from sample_helper.core.conversion import convert_value
from sample_helper.core.help import format_value
from sample_helper.exceptions import (
    EnvironmentError,
    PromptCancelledError,
    ValueConversionError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_VALUE_MESSAGE = "Please enter a valid value!"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


@dataclass(frozen=True, slots=True)
class UserOption:
    """One entry of a :func:`request_user_choice` menu."""

    name: str
    target: Callable[[], object]


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _build_input_message(name: str, default: object) -> str:
    """Build the prompt label, e.g. ``"Port [8080]:"``."""
    if default is None:
        return f"{name}:"
    return f"{name} [{format_value(default)}]:"


def _build_option_label(index: int, option: UserOption) -> str:
    """Render ``"1.) Name"`` for the zero-based *index*."""
    return f"{index + 1}.) {option.name}"


# ---------------------------------------------------------------------------
# Value prompts
# ---------------------------------------------------------------------------

def request_user_input(
    name: str,
    default: T | None = None,
    value_type: type = str,
    *,
    out: StyledConsole = console,
) -> Any:
    """Ask for a value of *value_type*, looping until it converts.

    Empty input keeps *default*.

    Raises
    ------
    PromptCancelledError
        If the user cancels the prompt.
    """
    questionary = _import_questionary()
    message = _build_input_message(name, default)

    while True:
        answer: str | None = questionary.text(message, qmark="  ").ask()
        if answer is None:
            raise PromptCancelledError(f"No value entered for {name}.")
        if not answer:
            return default
        try:
            return convert_value(answer, value_type)
        except ValueConversionError as exc:
            logger.debug("Rejected input for %s: %s", name, exc)
            out.error(INVALID_VALUE_MESSAGE)


def fill_from_user_input(
    configuration: T,
    *,
    table: ArgumentTable | None = None,
    out: StyledConsole = console,
) -> T:
    """Prompt for each registered argument of *configuration* in place.

    The current attribute value is offered as the default.
    """
    if table is None:
        table = table_for(type(configuration))

    out.write_line(
        f" Please enter values for the {type(configuration).__name__}:", "prompt",
    )
    for argument in table:
        value = request_user_input(
            argument.display_name,
            argument.get(configuration),
            argument.value_type,
            out=out,
        )
        argument.set(configuration, value)

    out.write_line()
    return configuration


def create_from_user_input(config_type: type[T], *, out: StyledConsole = console) -> T:
    """Instantiate *config_type* with no arguments and prompt for its values."""
    return fill_from_user_input(config_type(), out=out)


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------

def request_user_choice(
    question: str,
    options: Sequence[UserOption],
) -> UserOption:
    """Let the user pick one of *options*, run its target and return it.

    Raises
    ------
    ValueError
        If *question* or *options* is empty.
    PromptCancelledError
        If the user cancels the selection.
    """
    if not question:
        raise ValueError("question must not be empty")
    if not options:
        raise ValueError("options must not be empty")

    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_option_label(i, option), value=option)
        for i, option in enumerate(options)
    ]
    selected: UserOption | None = questionary.select(
        question,
        choices=choices,
        use_shortcuts=len(choices) <= 36,
    ).ask()

    if selected is None:
        raise PromptCancelledError(
            "No option selected.",
            hint="Use arrow keys or the option number, then press Enter.",
        )

    logger.debug("Selected option %r", selected.name)
    selected.target()
    return selected


def confirm(question: str) -> bool:
    """Ask a yes/no *question* and return the answer."""
    if not question:
        raise ValueError("question must not be empty")

    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(question, default=False).ask()
    if answer is None:
        raise PromptCancelledError("No answer given.")
    return answer


# ---------------------------------------------------------------------------
# Pauses
# ---------------------------------------------------------------------------

def press_any_key_to_exit(*, out: StyledConsole = console) -> None:
    """Display the exit message and wait for any key."""
    questionary = _import_questionary()
    out.write_line()
    questionary.press_any_key_to_continue(" Press any key to exit").ask()


def press_enter_to_continue(*, out: StyledConsole = console) -> None:
    """Display the continue message and wait for Enter."""
    questionary = _import_questionary()
    out.write_line()
    questionary.text(" Press ENTER to continue", qmark="").ask()

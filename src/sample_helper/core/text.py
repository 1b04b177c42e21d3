"""Small string helpers for console and report output."""

from __future__ import annotations

import html
import traceback
from typing import Final

ELLIPSIS: Final[str] = "..."


def trim_length(text: str, max_length: int) -> str:
    """Cut *text* to *max_length* characters, ending in ``...`` if trimmed.

    Raises
    ------
    ValueError
        If *max_length* is smaller than 3.
    """
    if max_length < len(ELLIPSIS):
        raise ValueError("Please specify a maximum length of at least 3")
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def trim_start(text: str, *words: str) -> str:
    """Strip each of *words* from the start of *text*, ignoring case.

    Words are applied in order; each one is removed repeatedly while
    the text still starts with it.  Only the first ``len(word)``
    characters are compared, so case folds that change length never
    cut into the rest of the text.
    """
    for word in words:
        if not word:
            continue
        folded = word.casefold()
        while text[: len(word)].casefold() == folded:
            text = text[len(word):]
    return text


def exception_to_html(exc: BaseException) -> str:
    """Render *exc* and its traceback as a red HTML fragment."""
    formatted = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    body = html.escape(formatted.rstrip("\n"))
    body = body.replace("\n", "\n<br/>")
    body = body.replace("  ", " &nbsp;")
    return f'<font color="red">{body}</font>'

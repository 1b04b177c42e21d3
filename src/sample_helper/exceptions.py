"""Custom exception hierarchy for sample-helper.

Every error raised on purpose by this package inherits from
:class:`SampleHelperError`.  Per-token problems found while parsing a
command line are *reported*, not raised. Only programmer errors
(bad argument tables) and interactive cancellations propagate.

Hierarchy
---------
SampleHelperError
├── ArgumentDefinitionError
├── ValueConversionError
├── PromptCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class SampleHelperError(Exception):
    """Base exception for all sample-helper errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument tables -------------------------------------------------------

class ArgumentDefinitionError(SampleHelperError):
    """Raised when an argument table is malformed or ambiguous."""


class ValueConversionError(SampleHelperError):
    """Raised when a string cannot be converted to its declared type."""

    def __init__(
        self,
        value: str,
        target_type: type,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"Cannot convert {value!r} to '{type_label(target_type)}'.",
            hint=hint,
        )
        self.value: str = value
        self.target_type: type = target_type


# --- Interactive prompts ---------------------------------------------------

class PromptCancelledError(SampleHelperError):
    """Raised when the user cancels an interactive prompt (Ctrl+C / Esc)."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SampleHelperError):
    """Raised when an optional runtime dependency is not available."""


def type_label(target_type: type) -> str:
    """Return the short, user-facing name of *target_type*."""
    return getattr(target_type, "__name__", str(target_type))

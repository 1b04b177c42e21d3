"""Allow ``python -m sample_helper`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m sample_helper`` behaves identically to the
``sample-helper`` console script.
"""

from __future__ import annotations

from sample_helper.cli.app import cli

if __name__ == "__main__":
    cli()

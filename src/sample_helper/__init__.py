"""sample-helper: console application helpers.

Styled console output, interactive prompts, string helpers, and a
command-line argument parser driven by explicit argument tables.
"""

from sample_helper.version import __version__

__all__: list[str] = ["__version__"]

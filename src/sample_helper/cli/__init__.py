"""CLI layer: styled output, prompts, command-line entry points.

This package is the outermost layer of the library.  It may import
from ``core``, but ``core`` never imports from ``cli``.
"""

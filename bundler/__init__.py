"""
Files bundler package.

This package provides a command-line interface (CLI) that concatenates
the source files of selected languages into a single bundle file.  The
bundle can optionally include:

* One comment per bundled file naming its source path.
* An author comment.
* File contents with blank lines removed.

Files are ordered by name or by extension.  A second command records the
bundle options interactively in a response file for later reuse.

See `cli.py` for the entry point.
"""

__version__ = "1.0.0"

__all__ = [
    "cli",
]

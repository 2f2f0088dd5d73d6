"""
Error types raised by the bundler.

Every failure a subcommand can report derives from `BundlerError`, so the
CLI handlers catch a single type at the top level, print the message and
return a non-zero exit code.  User-input errors and I/O errors share the
same reporting format.
"""

from __future__ import annotations

from typing import Iterable, Tuple


class BundlerError(Exception):
    """Base class for all reportable bundler errors."""


class InvalidLanguage(BundlerError):
    """One or more language identifiers are not supported."""

    def __init__(self, tokens: Iterable[str], supported: Iterable[str]) -> None:
        self.tokens: Tuple[str, ...] = tuple(tokens)
        shown = ", ".join(repr(t) for t in self.tokens) or "(empty)"
        super().__init__(
            f"Invalid language(s): {shown}. "
            f"Supported languages are: {', '.join(supported)}."
        )


class NoMatchingFiles(BundlerError):
    """Discovery found nothing to bundle."""


class OutputPathInvalid(BundlerError):
    """The output location cannot be written to."""


class BundleWriteFailed(BundlerError):
    """An I/O error interrupted writing the bundle."""


class PromptAborted(BundlerError):
    """The interactive session ended before all answers were collected."""

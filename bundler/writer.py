"""
Bundle writer.

Concatenates the ordered files into the output file, optionally preceded
by one source comment per file and an author comment.  The output is
written in text mode, so ``\\n`` becomes the platform line terminator.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, TextIO

from .config import BundleConfig
from .discovery import FileEntry
from .errors import BundleWriteFailed, OutputPathInvalid

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "// "


def strip_blank_lines(text: str) -> str:
    """Drop empty and whitespace-only lines, keeping the rest in order.

    Only ``\\n`` separates lines; text mode has already normalized line
    endings, and characters such as U+2028 stay inside their line.
    """
    return "\n".join(line for line in text.split("\n") if line.strip())


def source_comment(entry: FileEntry) -> str:
    return f"{COMMENT_PREFIX}Source file: {entry.name}, Path: {entry.path}"


def author_comment(author: str) -> str:
    return f"{COMMENT_PREFIX}Author: {author}"


class BundleWriter:
    """Writes a bundle according to a `BundleConfig`."""

    def __init__(self, config: BundleConfig) -> None:
        self.config = config

    def check_output(self) -> Path:
        """Return the absolute output path or raise `OutputPathInvalid`."""
        output = Path(self.config.output).absolute()
        if not output.parent.is_dir():
            raise OutputPathInvalid(
                f"The directory path for the output file does not exist: {output.parent}"
            )
        if output.is_dir():
            raise OutputPathInvalid(f"The output path is a directory: {output}")
        return output

    def header_lines(self, files: Sequence[FileEntry]) -> List[str]:
        lines: List[str] = []
        if self.config.include_source_comment:
            lines.extend(source_comment(f) for f in files)
        if self.config.author:
            lines.append(author_comment(self.config.author))
        return lines

    def read_content(self, entry: FileEntry) -> str:
        with entry.path.open("r", encoding=self.config.encoding, errors="replace") as f:
            content = f.read()
        if self.config.remove_blank_lines:
            content = strip_blank_lines(content)
        return content

    def _emit(self, out: TextIO, files: Sequence[FileEntry]) -> None:
        for line in self.header_lines(files):
            out.write(line + "\n")
        for entry in files:
            logger.debug("Appending %s", entry.path)
            out.write(self.read_content(entry))
            out.write("\n")

    def write(self, files: Sequence[FileEntry]) -> Path:
        """Write `files` into the output file and return its path.

        The output is created or overwritten.  An I/O or encoding error
        part way through leaves a partial file and raises
        `BundleWriteFailed`.
        """
        output = self.check_output()
        try:
            with output.open("w", encoding=self.config.encoding) as out:
                self._emit(out, files)
        except (OSError, UnicodeError, LookupError) as exc:
            raise BundleWriteFailed(f"Failed to write bundle {output}: {exc}") from exc
        logger.info("Wrote %d file(s) to %s", len(files), output)
        return output

"""
File discovery for the bundler.

Walks a directory tree and returns the files whose extension is one of
the requested ones, skipping anything that looks like build output.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import DEFAULT_EXCLUDE_MARKERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """A discovered source file."""

    path: Path
    name: str
    extension: str
    directory: Path

    @classmethod
    def from_path(cls, path: Path) -> "FileEntry":
        path = path.absolute()
        return cls(path=path, name=path.name, extension=path.suffix, directory=path.parent)


def is_excluded(segment: str, markers: Sequence[str]) -> bool:
    """Return True if `segment` contains any marker, ignoring case."""
    lowered = segment.lower()
    return any(m.lower() in lowered for m in markers if m)


def discover(
    root: Path,
    extensions: Iterable[str],
    exclude_markers: Sequence[str] = (),
    skip: Iterable[Path] = (),
) -> List[FileEntry]:
    """Collect files under `root` whose extension is in `extensions`.

    Extension matching is exact and case-insensitive (``.JS`` matches
    ``.js`` but ``.cjs`` does not).  Segments of the path relative to
    `root`, the file name included, are checked against the build
    output markers (`bin`, `debug`, `obj`) plus any `exclude_markers`;
    excluded directories are not descended into.
    Symlinked directories are not followed.  Names are visited in sorted
    order so the result is the same on every platform.
    """
    root = Path(root).absolute()
    wanted = {e.lower() for e in extensions}
    skipped = {Path(p).resolve() for p in skip}
    markers = [*DEFAULT_EXCLUDE_MARKERS, *exclude_markers]
    found: List[FileEntry] = []

    if not root.is_dir():
        logger.warning("Discovery root %s is not a directory", root)
        return found

    for dirpath, dirnames, filenames in os.walk(root, topdown=True):
        kept = []
        for d in sorted(dirnames):
            if is_excluded(d, markers):
                logger.debug("Skipping directory %s", os.path.join(dirpath, d))
            else:
                kept.append(d)
        dirnames[:] = kept

        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.suffix.lower() not in wanted:
                continue
            if is_excluded(filename, markers):
                logger.debug("Skipping file %s", path)
                continue
            if path.resolve() in skipped:
                continue
            found.append(FileEntry.from_path(path))

    logger.info("Discovered %d file(s) under %s", len(found), root)
    return found

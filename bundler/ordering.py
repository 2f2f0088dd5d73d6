"""Ordering of discovered files."""

from __future__ import annotations

from typing import Iterable, List

from .config import SortMode
from .discovery import FileEntry


def order(files: Iterable[FileEntry], mode: SortMode = SortMode.BY_NAME) -> List[FileEntry]:
    """Return `files` sorted by name or by extension.

    Both sorts are stable and compare strings by code point; files with
    the same extension keep the order they were given in.
    """
    if mode is SortMode.BY_EXTENSION:
        return sorted(files, key=lambda f: f.extension)
    return sorted(files, key=lambda f: f.name)

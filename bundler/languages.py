"""
Supported languages and their file extensions.

The table is fixed; `validate` turns the user's ``--language`` value into
a set of identifiers and `extensions_for` maps them to extensions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping

from .errors import InvalidLanguage

ALL = "all"

LANGUAGES: Mapping[str, str] = MappingProxyType({
    "csharp": ".cs",
    "c": ".c",
    "cpp": ".cpp",
    "java": ".java",
    "js": ".js",
    "html": ".html",
    "css": ".css",
    "scss": ".scss",
    "ts": ".ts",
    "sql": ".sql",
    "python": ".py",
})


def supported_languages() -> List[str]:
    """Return every identifier accepted by `validate`, including ``all``."""
    return [*LANGUAGES, ALL]


def validate(value: str) -> FrozenSet[str]:
    """Parse a comma separated language list (or ``all``).

    Matching is case-insensitive and surrounding whitespace is ignored.
    Raises `InvalidLanguage` naming every unknown token; blank input and
    empty list items are rejected as well.
    """
    normalized = (value or "").strip().lower()
    if normalized == ALL:
        return frozenset(LANGUAGES)
    if not normalized:
        raise InvalidLanguage([value or ""], supported_languages())

    tokens = [t.strip() for t in normalized.split(",")]
    unknown = [t for t in tokens if t not in LANGUAGES]
    if unknown:
        raise InvalidLanguage(unknown, supported_languages())
    return frozenset(tokens)


def extensions_for(languages: Iterable[str]) -> FrozenSet[str]:
    return frozenset(LANGUAGES[lang] for lang in languages)

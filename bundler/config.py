"""
Configuration management for the bundler CLI.

Two kinds of configuration live here:

* `BundlerSettings` holds project-level settings loaded from an optional
  `bundler_config.json` in the working directory and from the
  environment.  It controls which path fragments mark build output,
  which encoding source files are read with, and where `create-rsp`
  writes its response file.  If the file is absent, defaults are used.

* `BundleConfig` is the immutable description of a single `bundle`
  invocation, built once from the parsed command line.

Example `bundler_config.json`::

    {
      "exclude_markers": ["node_modules", "generated"],
      "encoding": "utf-8",
      "response_file": "response.rsp"
    }
"""

from __future__ import annotations

import codecs
import enum
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional

from . import languages

logger = logging.getLogger(__name__)

CONFIG_FILE = "bundler_config.json"
LOGLEVEL_ENV = "BUNDLER_LOGLEVEL"

DEFAULT_EXCLUDE_MARKERS = ("bin", "debug", "obj")
DEFAULT_OUTPUT = Path("bundle.txt")
DEFAULT_RESPONSE_FILE = "response.rsp"


class SortMode(enum.Enum):
    """Ordering applied to discovered files before bundling."""

    BY_NAME = "abc"
    BY_EXTENSION = "type"


@dataclass
class BundlerSettings:
    """Project-level settings.

    Attributes
    ----------
    exclude_markers: List[str]
        Case-insensitive fragments; any file whose relative path has a
        segment containing one of them is skipped.  Always starts with
        `bin`, `debug` and `obj` so build artifacts never reach the
        bundle; the config file can only add to it.

    encoding: str
        Encoding used to read source files and write the bundle.

    response_file: str
        File name written by `create-rsp`, relative to the working
        directory.

    config_path: Path | None
        File these settings were loaded from, kept for logging.
    """

    exclude_markers: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_MARKERS))
    encoding: str = "utf-8"
    response_file: str = DEFAULT_RESPONSE_FILE
    config_path: Optional[Path] = None

    @staticmethod
    def load(base_dir: Path) -> "BundlerSettings":
        """Load settings from `bundler_config.json` in `base_dir`.

        Unknown keys are ignored.  `exclude_markers` extends the built-in
        markers rather than replacing them.  A file that cannot be parsed,
        or that names an unknown encoding, is reported as a warning and
        defaults are used instead.
        """
        config_path = base_dir / CONFIG_FILE
        if not config_path.exists():
            return BundlerSettings()
        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            settings = BundlerSettings(config_path=config_path)
            if "exclude_markers" in data:
                extra = data["exclude_markers"]
                if not isinstance(extra, list):
                    raise ValueError("exclude_markers must be a list of strings")
                settings.exclude_markers += [str(m) for m in extra if str(m) not in settings.exclude_markers]
            if "encoding" in data:
                settings.encoding = codecs.lookup(str(data["encoding"])).name
            if "response_file" in data:
                settings.response_file = str(data["response_file"])
            return settings
        except (OSError, ValueError, TypeError, LookupError) as exc:
            logger.warning("Failed to parse %s: %s. Using defaults.", config_path, exc)
            return BundlerSettings()


def default_log_level() -> str:
    level = os.environ.get(LOGLEVEL_ENV, "WARNING").upper()
    return level if level in ("DEBUG", "INFO", "WARNING", "ERROR") else "WARNING"


@dataclass(frozen=True)
class BundleConfig:
    """Options for one `bundle` run.  Immutable once built."""

    output: Path
    languages: FrozenSet[str]
    include_source_comment: bool = False
    sort: SortMode = SortMode.BY_NAME
    remove_blank_lines: bool = False
    author: Optional[str] = None
    encoding: str = "utf-8"

    @property
    def extensions(self) -> FrozenSet[str]:
        return languages.extensions_for(self.languages)

    @classmethod
    def from_args(
        cls,
        output: Optional[Path],
        language: str,
        note: bool = False,
        sort: str = SortMode.BY_NAME.value,
        remove_empty_lines: bool = False,
        author: Optional[str] = None,
        encoding: str = "utf-8",
    ) -> "BundleConfig":
        """Build a config from raw CLI values, validating the language list."""
        return cls(
            output=output if output is not None else DEFAULT_OUTPUT,
            languages=languages.validate(language),
            include_source_comment=bool(note),
            sort=SortMode(sort or SortMode.BY_NAME.value),
            remove_blank_lines=bool(remove_empty_lines),
            author=author or None,
            encoding=encoding,
        )

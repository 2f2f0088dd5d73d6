"""
Interactive creation of response files.

`create-rsp` asks the user for the same options `bundle` accepts and
writes them to a response file, one ``--flag value`` pair per line, so
that ``bundler bundle @response.rsp`` replays them.

Only the language list is validated here (and re-asked until it is
valid).  Output path, sort mode and author are captured as typed; the
`bundle` command validates them when the file is used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from . import languages
from .errors import InvalidLanguage, PromptAborted

logger = logging.getLogger(__name__)

BOOL_TOKENS = {True: "true", False: "false"}
YES_ANSWERS = ("yes", "y")

LANGUAGE_PROMPT = "Enter language (comma separated or 'all'):"
OUTPUT_PROMPT = "Enter output file path:"
NOTE_PROMPT = "Add source comment? (yes/no):"
SORT_PROMPT = "Sort files by name or type? (abc/type):"
REMOVE_EMPTY_LINES_PROMPT = "Remove empty lines? (yes/no):"
AUTHOR_PROMPT = "Enter author's name (optional):"


@dataclass
class ResponseAnswers:
    """Values captured during a `create-rsp` session."""

    language: str = ""
    output: str = ""
    note: bool = False
    sort: str = ""
    remove_empty_lines: bool = False
    author: str = ""


class InteractivePromptCollector:
    """Asks the `create-rsp` questions one at a time.

    `ask` reads one line of input given a prompt (defaults to `input`)
    and `say` prints a line (defaults to `print`); tests inject their own.
    """

    def __init__(
        self,
        ask: Callable[[str], str] = input,
        say: Callable[[str], None] = print,
    ) -> None:
        self.ask = ask
        self.say = say

    def _read(self, prompt: str) -> str:
        self.say(prompt)
        try:
            return self.ask("")
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptAborted("Input ended before all answers were given.") from exc

    def _read_yes_no(self, prompt: str) -> bool:
        return self._read(prompt).strip().lower() in YES_ANSWERS

    def read_language(self) -> str:
        """Ask until a valid language list is entered; return it normalized."""
        while True:
            self.say(LANGUAGE_PROMPT)
            for name in languages.supported_languages():
                self.say(name)
            try:
                raw = self.ask("")
            except (EOFError, KeyboardInterrupt) as exc:
                raise PromptAborted("Input ended before a language was chosen.") from exc
            try:
                selected = languages.validate(raw)
            except InvalidLanguage as exc:
                self.say(f"Error: {exc}")
                continue
            if raw.strip().lower() == languages.ALL:
                return languages.ALL
            return ",".join(lang for lang in languages.LANGUAGES if lang in selected)

    def collect(self) -> ResponseAnswers:
        answers = ResponseAnswers()
        answers.language = self.read_language()
        answers.output = self._read(OUTPUT_PROMPT).strip()
        answers.note = self._read_yes_no(NOTE_PROMPT)
        answers.sort = self._read(SORT_PROMPT).strip().lower()
        answers.remove_empty_lines = self._read_yes_no(REMOVE_EMPTY_LINES_PROMPT)
        answers.author = self._read(AUTHOR_PROMPT).strip()
        return answers


def serialize(answers: ResponseAnswers) -> List[str]:
    """Turn answers into response file lines.

    Empty language, output, sort and author values are left out; the two
    boolean options are always written.
    """
    lines: List[str] = []
    if answers.language:
        lines.append(f"--language {answers.language}")
    if answers.output:
        lines.append(f"--output {answers.output}")
    lines.append(f"--note {BOOL_TOKENS[bool(answers.note)]}")
    if answers.sort:
        lines.append(f"--sort {answers.sort}")
    lines.append(f"--remove-empty-lines {BOOL_TOKENS[bool(answers.remove_empty_lines)]}")
    if answers.author:
        lines.append(f"--author {answers.author}")
    return lines


def write_response_file(lines: List[str], path: Path, encoding: Optional[str] = "utf-8") -> Path:
    path = Path(path)
    with path.open("w", encoding=encoding) as f:
        for line in lines:
            f.write(line + "\n")
    logger.info("Wrote %d option line(s) to %s", len(lines), path)
    return path

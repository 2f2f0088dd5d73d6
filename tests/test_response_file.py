import pytest

from bundler import languages
from bundler.errors import PromptAborted
from bundler.response_file import (
    LANGUAGE_PROMPT,
    InteractivePromptCollector,
    ResponseAnswers,
    serialize,
    write_response_file,
)


class ScriptedConsole:
    """Feeds canned answers to the collector and records what it printed."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.printed = []

    def ask(self, prompt):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def say(self, message):
        self.printed.append(message)


def collect(answers):
    console = ScriptedConsole(answers)
    result = InteractivePromptCollector(ask=console.ask, say=console.say).collect()
    return result, console


def test_collects_all_answers():
    answers, _ = collect(["CSharp, ts", " out/bundle.txt ", "YES", "Type", "no", "Ann Lee"])
    assert answers == ResponseAnswers(
        language="csharp,ts",
        output="out/bundle.txt",
        note=True,
        sort="type",
        remove_empty_lines=False,
        author="Ann Lee",
    )


def test_all_is_kept_as_all():
    answers, _ = collect(["ALL", "", "", "", "", ""])
    assert answers.language == "all"


def test_language_reprompts_until_valid():
    answers, console = collect(["", "cobol", "java,rust", "java", "", "n", "", "y", ""])
    assert answers.language == "java"
    assert answers.remove_empty_lines is True
    assert console.printed.count(LANGUAGE_PROMPT) == 4
    errors = [line for line in console.printed if line.startswith("Error:")]
    assert len(errors) == 3
    assert "'rust'" in errors[2]


def test_supported_languages_are_listed():
    _, console = collect(["js", "", "", "", "", ""])
    for name in languages.supported_languages():
        assert name in console.printed


def test_end_of_input_while_choosing_language():
    with pytest.raises(PromptAborted):
        collect(["cobol"])


def test_end_of_input_later_in_session():
    with pytest.raises(PromptAborted):
        collect(["js", "bundle.txt"])


def test_keyboard_interrupt_aborts():
    def ask(prompt):
        raise KeyboardInterrupt

    with pytest.raises(PromptAborted):
        InteractivePromptCollector(ask=ask, say=lambda m: None).collect()


def test_serialize_full():
    lines = serialize(ResponseAnswers("csharp,ts", "out.txt", True, "type", True, "Ann Lee"))
    assert lines == [
        "--language csharp,ts",
        "--output out.txt",
        "--note true",
        "--sort type",
        "--remove-empty-lines true",
        "--author Ann Lee",
    ]


def test_serialize_omits_empty_values_but_keeps_flags():
    assert serialize(ResponseAnswers()) == ["--note false", "--remove-empty-lines false"]


def test_write_response_file(tmp_path):
    target = tmp_path / "response.rsp"
    target.write_text("old\n", encoding="utf-8")
    write_response_file(["--language js", "--note false"], target)
    assert target.read_text(encoding="utf-8").splitlines() == ["--language js", "--note false"]

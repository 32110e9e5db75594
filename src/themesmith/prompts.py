"""Interactive questions that produce an :class:`~themesmith.answers.AnswerSet`."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, TextIO

from pydantic import ValidationError

from .answers import AnswerSet, check_keywords, check_prefix
from .config import ScaffoldSettings
from .errors import PromptAborted, ScaffoldError
from .naming import kebab_case, snake_case, title_case, title_snake_case

__all__ = ["Prompter", "Question", "build_questions", "collect_answers", "default_slug"]


Answers = Mapping[str, str]
DefaultFactory = Callable[[Answers], str]
Validator = Callable[[str], Optional[str]]


@dataclass(frozen=True, slots=True)
class Question:
    """A single text question.

    ``default`` is either a fixed string or a callable receiving the answers
    given so far. ``validate`` returns an error message for rejected values.
    """

    name: str
    message: str
    default: str | DefaultFactory = ""
    validate: Validator | None = None

    def resolve_default(self, answers: Answers) -> str:
        if callable(self.default):
            return self.default(answers)
        return self.default

    def check(self, value: str) -> str | None:
        if self.validate is None:
            return None
        return self.validate(value)


def default_slug(target: str | None, settings: ScaffoldSettings) -> str:
    """Return the slug offered for ``target``, the raw CLI argument."""

    name = Path(target).name if target else ""
    return name or settings.fallback_slug


def build_questions(target: str | None, settings: ScaffoldSettings) -> list[Question]:
    """Return the ordered questions for scaffolding into ``target``."""

    def author_uri(answers: Answers) -> str:
        if answers["author_name"] == settings.default_author:
            return settings.default_author_uri
        return ""

    def github_uri(answers: Answers) -> str:
        if (
            answers["author_name"] == settings.default_author
            or answers["author_uri"] == settings.default_author_uri
        ):
            return f"https://github.com/{settings.github_org}/{answers['slug']}"
        return ""

    def homepage(answers: Answers) -> str:
        return f"{answers['github_uri']}#readme" if answers["github_uri"] else ""

    return [
        Question("slug", "Theme slug", default_slug(target, settings)),
        Question("display_name", "Theme display name", lambda answers: title_case(answers["slug"])),
        Question("description", "Theme description", "Modern responsive WordPress Theme."),
        Question("author_name", "Author name", settings.default_author),
        Question(
            "author_slug",
            "Author slug/GitHub username",
            lambda answers: kebab_case(answers["author_name"]),
        ),
        Question("author_uri", "Author URL", author_uri),
        Question("github_uri", "GitHub repository URL", github_uri),
        Question("uri", "Theme homepage", homepage),
        Question("keywords", "Theme keywords", "responsive, modern", check_keywords),
        Question("text_domain", "Theme text-domain", lambda answers: answers["slug"]),
        Question(
            "func_prefix",
            "Theme function prefix",
            lambda answers: snake_case(answers["slug"]) + "_",
            lambda value: check_prefix(value, "Function prefix"),
        ),
        Question(
            "class_prefix",
            "Theme class prefix",
            lambda answers: title_snake_case(answers["slug"]) + "_",
            lambda value: check_prefix(value, "Class prefix"),
        ),
    ]


class Prompter:
    """Ask questions on a terminal, falling back to defaults on empty input."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
        *,
        accept_defaults: bool = False,
    ) -> None:
        self._input = input_func
        self._output = output
        self.accept_defaults = accept_defaults

    def _write(self, text: str) -> None:
        stream = self._output or sys.stdout
        stream.write(text)
        stream.flush()

    def ask(self, question: Question, answers: Answers) -> str:
        """Ask ``question`` until the answer passes validation."""

        default = question.resolve_default(answers)
        if self.accept_defaults:
            error = question.check(default)
            if error:
                raise ScaffoldError(f"default for {question.name!r} is invalid: {error}")
            return default

        suffix = f" ({default})" if default else ""
        while True:
            try:
                raw = self._input(f"? {question.message}{suffix}: ")
            except (EOFError, KeyboardInterrupt) as exc:
                raise PromptAborted("input cancelled by user") from exc
            value = raw.strip() or default
            error = question.check(value)
            if error is None:
                return value
            self._write(f"  {error}\n")


def collect_answers(questions: Sequence[Question], prompter: Prompter) -> AnswerSet:
    """Ask every question in order and return the validated answer set."""

    answers: dict[str, str] = {}
    for question in questions:
        answers[question.name] = prompter.ask(question, answers)

    try:
        return AnswerSet(**answers)
    except ValidationError as exc:
        raise ScaffoldError(f"invalid answers: {exc}") from exc

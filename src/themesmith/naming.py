"""Case conversion helpers used to derive prompt defaults."""

from __future__ import annotations

import re

__all__ = [
    "kebab_case",
    "snake_case",
    "strip_case",
    "title_case",
    "title_snake_case",
]


_UPPERCASE_RUNS = re.compile(r"([A-Z]+)")
_WORD_SEPARATORS = re.compile(r"[_\-]+")
_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"\b\w")


def _join_words(value: str, separator: str) -> str:
    return _WHITESPACE.sub(separator, value)


def strip_case(value: str) -> str:
    """Return ``value`` lowercased with its words separated by single spaces.

    A space is inserted in front of every run of capitals so ``"myTheme"``
    and ``"my_theme"`` both normalise to ``"my theme"``.
    """

    text = _UPPERCASE_RUNS.sub(r" \1", value)
    text = _WORD_SEPARATORS.sub(" ", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip().lower()


def title_case(value: str) -> str:
    """Return ``value`` with the first letter of every word capitalised."""

    return _WORD_START.sub(lambda match: match.group(0).upper(), strip_case(value))


def snake_case(value: str) -> str:
    return _join_words(strip_case(value), "_")


def title_snake_case(value: str) -> str:
    """Return ``value`` as ``Title_Snake_Case``, the PHP class prefix style."""

    return _join_words(title_case(value), "_")


def kebab_case(value: str) -> str:
    return _join_words(strip_case(value), "-")

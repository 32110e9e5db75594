"""The answer set collected from the user before scaffolding."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["AnswerSet", "check_keywords", "check_prefix"]


_WHITESPACE = re.compile(r"\s")


def check_prefix(value: str, label: str) -> str | None:
    """Return an error message when ``value`` is not a usable prefix."""

    if _WHITESPACE.search(value):
        return f"{label} must not contain any spaces."
    return None


def check_keywords(value: str) -> str | None:
    if not value.strip():
        return "Keywords must not be empty."
    return None


class AnswerSet(BaseModel):
    """Theme metadata substituted into the cloned template."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    slug: str = Field(..., description="Identifier-safe theme name.")
    display_name: str = Field(..., description="Human readable theme name.")
    description: str = Field("", description="One sentence summary of the theme.")
    author_name: str = Field("", description="Name of the theme author.")
    author_slug: str = Field("", description="Author slug or GitHub username.")
    author_uri: str = Field("", description="Homepage of the author.")
    github_uri: str = Field("", description="GitHub repository of the theme.")
    uri: str = Field("", description="Homepage of the theme.")
    keywords: str = Field(..., description="Comma separated theme keywords.")
    text_domain: str = Field(..., description="Localisation namespace of the theme.")
    func_prefix: str = Field(..., description="Prefix for global PHP functions.")
    class_prefix: str = Field(..., description="Prefix for PHP class names.")

    @field_validator("func_prefix")
    @classmethod
    def _validate_func_prefix(cls, value: str) -> str:
        error = check_prefix(value, "Function prefix")
        if error:
            raise ValueError(error)
        return value

    @field_validator("class_prefix")
    @classmethod
    def _validate_class_prefix(cls, value: str) -> str:
        error = check_prefix(value, "Class prefix")
        if error:
            raise ValueError(error)
        return value

    @field_validator("keywords")
    @classmethod
    def _validate_keywords(cls, value: str) -> str:
        error = check_keywords(value)
        if error:
            raise ValueError(error)
        return value

    def keyword_list(self) -> list[str]:
        """Return the trimmed keywords in the order they were entered."""

        return [keyword.strip() for keyword in self.keywords.split(",") if keyword.strip()]

    def quoted_keywords(self) -> str:
        """Return the keywords as a quoted, comma-joined JSON list body."""

        return ", ".join(f'"{keyword}"' for keyword in self.keyword_list())

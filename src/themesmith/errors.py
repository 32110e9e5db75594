"""Exception types raised while scaffolding a theme."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Raised when a scaffolding step fails and the run cannot continue."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PromptAborted(ScaffoldError):
    """Raised when the user cancels the interactive questions."""


class SubstitutionError(ScaffoldError):
    """Raised when a substitution pass cannot be applied."""


__all__ = ["PromptAborted", "ScaffoldError", "SubstitutionError"]

"""Scaffold new WordPress themes from the starter template repository.

The package asks for theme metadata, clones the template, promotes sample
manifests, replaces placeholder tokens and hands the result over as a fresh git
repository with its dependencies installed. The pieces are usable on their own
as well as through the ``themesmith`` command.
"""

from __future__ import annotations

from .answers import AnswerSet
from .config import ProjectPaths, ScaffoldSettings
from .errors import PromptAborted, ScaffoldError, SubstitutionError
from .naming import kebab_case, snake_case, strip_case, title_case, title_snake_case
from .pipeline import ScaffoldResult, ThemeScaffolder

__all__ = [
    "AnswerSet",
    "ProjectPaths",
    "PromptAborted",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldSettings",
    "SubstitutionError",
    "ThemeScaffolder",
    "kebab_case",
    "snake_case",
    "strip_case",
    "title_case",
    "title_snake_case",
]

__version__ = "0.1.0"

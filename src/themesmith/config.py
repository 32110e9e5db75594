"""Configuration shared by the prompt collector, pipeline and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

__all__ = ["ENV_PREFIX", "ProjectPaths", "ScaffoldSettings"]


ENV_PREFIX = "THEMESMITH_"

_ENV_FIELDS = {
    "TEMPLATE_URL": "template_url",
    "TEMPLATE_BRANCH": "template_branch",
    "PACKAGE_MANAGER": "package_manager",
}


@dataclass(frozen=True, slots=True)
class ScaffoldSettings:
    """Values that control where the template comes from and how it is set up.

    Attributes
    ----------
    template_url:
        Git remote cloned into the target directory.
    template_branch:
        Branch checked out from :attr:`template_url`.
    template_homepage:
        Link written into the generated README banner.
    package_manager:
        Executable used to install the theme's dependencies.
    commit_message:
        Message of the initial commit in the freshly created repository.
    default_author:
        Organisation offered as the default author. GitHub and author URL
        defaults are only filled in when the answers match this organisation.
    default_author_uri:
        Homepage of :attr:`default_author`.
    github_org:
        GitHub account that hosts repositories of :attr:`default_author`.
    fallback_slug:
        Slug offered when no usable target directory was given.
    install:
        Whether dependencies are installed once the project is ready.
    """

    template_url: str = "https://github.com/Denman-Digital/wp-theme-starter.git"
    template_branch: str = "npx"
    template_homepage: str = "https://github.com/Denman-Digital/wp-theme-starter/"
    package_manager: str = "npm"
    commit_message: str = "Created new theme from wp-theme-starter"
    default_author: str = "Denman Digital"
    default_author_uri: str = "https://denman.digital/"
    github_org: str = "Denman-Digital"
    fallback_slug: str = "my-project"
    install: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ScaffoldSettings":
        """Build settings from ``THEMESMITH_*`` environment variables."""

        environment: Mapping[str, str] = env if env is not None else os.environ
        values: dict[str, Any] = {}
        for suffix, attribute in _ENV_FIELDS.items():
            value = environment.get(f"{ENV_PREFIX}{suffix}", "").strip()
            if value:
                values[attribute] = value
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "ScaffoldSettings":
        """Return a copy with every override that is not ``None`` applied."""

        known = {item.name for item in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"unknown settings: {', '.join(sorted(unknown))}")
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class ProjectPaths:
    """Locations of the files touched while customising a cloned template."""

    root: Path
    package: Path
    package_sample: Path
    composer: Path
    composer_sample: Path
    composer_includes: Path
    composer_includes_sample: Path
    style_css: Path
    readme: Path
    repo_history: Path

    @classmethod
    def for_target(cls, target: str | Path) -> "ProjectPaths":
        root = Path(target)
        includes = root / "includes"
        return cls(
            root=root,
            package=root / "package.json",
            package_sample=root / "package-sample.json",
            composer=root / "composer.json",
            composer_sample=root / "composer-sample.json",
            composer_includes=includes / "composer.json",
            composer_includes_sample=includes / "composer-sample.json",
            style_css=root / "style.css",
            readme=root / "readme.md",
            repo_history=root / ".git",
        )

    @property
    def manifests(self) -> tuple[Path, Path, Path]:
        """Active manifests that carry theme metadata."""

        return (self.package, self.composer, self.composer_includes)

    def resolve_readme(self) -> Path:
        """Return the README in whichever letter case the template ships it."""

        if self.readme.exists() or not self.root.is_dir():
            return self.readme
        for candidate in sorted(self.root.iterdir()):
            if candidate.is_file() and candidate.name.lower() == self.readme.name:
                return candidate
        return self.readme

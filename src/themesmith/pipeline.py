"""The end-to-end flow that turns the template repository into a new theme."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .answers import AnswerSet
from .commands import (
    CommandRunner,
    SubprocessRunner,
    fetch_template,
    install_dependencies,
    reset_history,
)
from .config import ProjectPaths, ScaffoldSettings
from .errors import ScaffoldError, SubstitutionError
from .manifests import ManifestPair, manifest_pairs, promote_manifests
from .substitution import build_plan, run_plan

__all__ = ["ScaffoldResult", "ThemeScaffolder"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScaffoldResult:
    """What happened during a successful scaffolding run."""

    paths: ProjectPaths
    promoted: list[ManifestPair] = field(default_factory=list)
    substituted: dict[str, list[Path]] = field(default_factory=dict)
    substitution_error: SubstitutionError | None = None
    history_reset: bool = False
    installed: bool = False


class ThemeScaffolder:
    """Clone, customise, re-initialise and install a new theme.

    Clone and install failures raise :class:`~themesmith.errors.ScaffoldError`.
    Manifest promotion, substitution and history reset failures are logged and
    recorded on the returned :class:`ScaffoldResult`.
    """

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.runner = runner or SubprocessRunner()

    async def run(self, answers: AnswerSet, target: str | Path) -> ScaffoldResult:
        paths = ProjectPaths.for_target(target)
        result = ScaffoldResult(paths=paths)

        LOGGER.info('Cloning the template repository to "%s"', paths.root)
        if not await fetch_template(self.runner, self.settings, paths.root):
            raise ScaffoldError(f"unable to clone {self.settings.template_url}")

        result.promoted = promote_manifests(manifest_pairs(paths))

        LOGGER.info("Customizing theme metadata")
        try:
            result.substituted = run_plan(build_plan(answers, paths, self.settings))
        except SubstitutionError as exc:
            LOGGER.error("Theme customization stopped: %s", exc)
            result.substitution_error = exc

        LOGGER.info("Creating a blank-slate Git repo")
        self._ensure_ready(paths)
        result.history_reset = await reset_history(self.runner, self.settings, paths)
        if not result.history_reset:
            LOGGER.warning(
                "Was unable to finish removing the template's Git history "
                "and initialize a new blank repo"
            )

        if not self.settings.install:
            LOGGER.info("Skipping dependency installation")
            return result

        LOGGER.info("Installing dependencies for %s", paths.root)
        self._ensure_ready(paths)
        if not paths.package.is_file():
            LOGGER.warning("%s is missing; the install may fail", paths.package)
        if not await install_dependencies(self.runner, self.settings, paths):
            raise ScaffoldError(f"unable to install dependencies in {paths.root}")
        result.installed = True
        return result

    @staticmethod
    def _ensure_ready(paths: ProjectPaths) -> None:
        if not paths.root.is_dir():
            raise ScaffoldError(f"{paths.root} is not a directory")

    def next_steps(self, paths: ProjectPaths, *, installed: bool = True) -> str:
        """Return the shell command that starts working on the new theme."""

        manager = self.settings.package_manager
        if not installed:
            return f"cd {paths.root} && {manager} install && {manager} start"
        return f"cd {paths.root} && {manager} start"

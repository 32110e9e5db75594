"""External commands: cloning the template, resetting git and installing."""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Protocol, Sequence

from .config import ProjectPaths, ScaffoldSettings

__all__ = [
    "CommandRunner",
    "SubprocessRunner",
    "fetch_template",
    "install_dependencies",
    "reset_history",
]


LOGGER = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Run an external command and report whether it succeeded."""

    async def run(self, args: Sequence[str], *, cwd: Path | None = None) -> bool:
        ...


class SubprocessRunner:
    """Run commands with their output passed through to the terminal."""

    async def run(self, args: Sequence[str], *, cwd: Path | None = None) -> bool:
        command = " ".join(args)
        LOGGER.debug("running %s (cwd=%s)", command, cwd)
        # resolves npm.cmd and friends on Windows
        executable = shutil.which(args[0]) or args[0]
        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                *args[1:],
                cwd=str(cwd) if cwd is not None else None,
            )
        except OSError as exc:
            LOGGER.error('Failed to execute "%s": %s', command, exc)
            return False

        returncode = await process.wait()
        if returncode != 0:
            LOGGER.error('Failed to execute "%s" (exit status %s)', command, returncode)
            return False
        return True


async def fetch_template(runner: CommandRunner, settings: ScaffoldSettings, target: Path) -> bool:
    """Shallow clone the template repository into ``target``."""

    return await runner.run(
        [
            "git",
            "clone",
            "-b",
            settings.template_branch,
            "--depth",
            "1",
            settings.template_url,
            str(target),
        ]
    )


async def reset_history(
    runner: CommandRunner, settings: ScaffoldSettings, paths: ProjectPaths
) -> bool:
    """Replace the template's git history with a single initial commit."""

    try:
        if paths.repo_history.is_dir():
            shutil.rmtree(paths.repo_history)
        elif paths.repo_history.exists():
            paths.repo_history.unlink()
    except OSError as exc:
        LOGGER.error("Unable to remove %s: %s", paths.repo_history, exc)
        return False

    if paths.repo_history.exists():
        LOGGER.error("%s still exists after removal", paths.repo_history)
        return False

    steps = (
        ["git", "init"],
        ["git", "add", "--all"],
        ["git", "commit", "-m", settings.commit_message],
    )
    for step in steps:
        if not await runner.run(step, cwd=paths.root):
            return False
    return True


async def install_dependencies(
    runner: CommandRunner, settings: ScaffoldSettings, paths: ProjectPaths
) -> bool:
    return await runner.run([settings.package_manager, "install"], cwd=paths.root)

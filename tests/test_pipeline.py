from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path

import pytest

from themesmith.answers import AnswerSet
from themesmith.config import ProjectPaths, ScaffoldSettings
from themesmith.errors import ScaffoldError
from themesmith.pipeline import ThemeScaffolder
from tests.fixtures.theme_template import PACKAGE_JSON, FakeRunner


@pytest.fixture()
def answers() -> AnswerSet:
    return AnswerSet(
        slug="my-project",
        display_name="My Project",
        description="Modern responsive WordPress Theme.",
        author_name="Denman Digital",
        author_slug="denman-digital",
        author_uri="https://denman.digital/",
        github_uri="https://github.com/Denman-Digital/my-project",
        uri="https://github.com/Denman-Digital/my-project#readme",
        keywords="responsive, modern",
        text_domain="my-project",
        func_prefix="my_project_",
        class_prefix="My_Project_",
    )


def test_run_executes_every_step(tmp_path: Path, answers: AnswerSet, runner: FakeRunner):
    target = tmp_path / "my-project"
    result = asyncio.run(ThemeScaffolder(runner=runner).run(answers, target))

    assert runner.commands == ["git clone", "git init", "git add", "git commit", "npm install"]
    assert len(result.promoted) == 3
    assert result.substitution_error is None
    assert result.history_reset and result.installed
    assert '"name": "my-project"' in (target / "package.json").read_text(encoding="utf-8")
    assert not (target / ".git").exists()


def test_clone_failure_is_fatal_and_skips_substitution(tmp_path: Path, answers: AnswerSet):
    runner = FakeRunner(failing=["git clone"])

    with pytest.raises(ScaffoldError):
        asyncio.run(ThemeScaffolder(runner=runner).run(answers, tmp_path / "theme"))

    assert runner.commands == ["git clone"]
    assert not (tmp_path / "theme").exists()


def test_install_failure_is_fatal(tmp_path: Path, answers: AnswerSet):
    runner = FakeRunner(failing=["npm install"])

    with pytest.raises(ScaffoldError):
        asyncio.run(ThemeScaffolder(runner=runner).run(answers, tmp_path / "theme"))


def test_reset_failure_only_warns(
    tmp_path: Path, answers: AnswerSet, caplog: pytest.LogCaptureFixture
):
    caplog.set_level(logging.INFO)
    runner = FakeRunner(failing=["git commit"])

    result = asyncio.run(ThemeScaffolder(runner=runner).run(answers, tmp_path / "theme"))

    assert result.history_reset is False
    assert result.installed is True
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_missing_samples_still_substitute_original_manifest(
    tmp_path: Path, answers: AnswerSet, caplog: pytest.LogCaptureFixture
):
    caplog.set_level(logging.INFO)
    runner = FakeRunner(samples=False)
    target = tmp_path / "theme"

    result = asyncio.run(ThemeScaffolder(runner=runner).run(answers, target))

    assert result.promoted == []
    assert (target / "package.json").read_text(encoding="utf-8") == PACKAGE_JSON
    assert "My Project" in (target / "style.css").read_text(encoding="utf-8")
    assert "metadata" in result.substituted
    assert any("Unable to generate new package.json" in r.getMessage() for r in caplog.records)


def test_substitution_failure_is_recoverable(tmp_path: Path, answers: AnswerSet):
    class RunnerWithoutReadme(FakeRunner):
        async def run(self, args, *, cwd=None):
            ok = await super().run(args, cwd=cwd)
            if tuple(args[:2]) == ("git", "clone"):
                (Path(args[-1]) / "readme.md").unlink()
            return ok

    runner = RunnerWithoutReadme()
    result = asyncio.run(ThemeScaffolder(runner=runner).run(answers, tmp_path / "theme"))

    assert result.substitution_error is not None
    assert result.installed
    assert "npm install" in runner.commands


def test_install_can_be_skipped(tmp_path: Path, answers: AnswerSet, runner: FakeRunner):
    settings = ScaffoldSettings(install=False)
    result = asyncio.run(ThemeScaffolder(settings, runner).run(answers, tmp_path / "theme"))

    assert "npm install" not in runner.commands
    assert result.installed is False


def test_next_steps_mentions_package_manager():
    scaffolder = ThemeScaffolder(ScaffoldSettings(package_manager="yarn"))

    assert scaffolder.next_steps(ProjectPaths.for_target("shop")) == "cd shop && yarn start"


class CloneWithout(FakeRunner):
    """Fake runner that deletes ``names`` from the clone right after cloning."""

    def __init__(self, *names: str) -> None:
        super().__init__()
        self.names = names

    async def run(self, args, *, cwd=None):
        ok = await super().run(args, cwd=cwd)
        if tuple(args[:2]) == ("git", "clone"):
            root = Path(args[-1])
            for name in self.names:
                path = root / name
                if path.is_dir():
                    shutil.rmtree(path)
                elif path.exists():
                    path.unlink()
        return ok


def test_missing_package_manifest_warns_before_install(
    tmp_path: Path, answers: AnswerSet, caplog: pytest.LogCaptureFixture
):
    caplog.set_level(logging.INFO)
    runner = CloneWithout("package.json", "package-sample.json")

    result = asyncio.run(ThemeScaffolder(runner=runner).run(answers, tmp_path / "theme"))

    assert result.installed
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("package.json is missing" in message for message in warnings)


def test_vanished_target_is_fatal_before_reset(tmp_path: Path, answers: AnswerSet):
    runner = CloneWithout(".")

    with pytest.raises(ScaffoldError, match="is not a directory"):
        asyncio.run(ThemeScaffolder(runner=runner).run(answers, tmp_path / "theme"))

    assert runner.commands == ["git clone"]


def test_next_steps_include_install_when_skipped():
    scaffolder = ThemeScaffolder()

    assert (
        scaffolder.next_steps(ProjectPaths.for_target("shop"), installed=False)
        == "cd shop && npm install && npm start"
    )

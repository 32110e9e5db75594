from __future__ import annotations

from pathlib import Path

import pytest

from themesmith.config import ProjectPaths, ScaffoldSettings


def test_from_env_reads_prefixed_variables():
    settings = ScaffoldSettings.from_env(
        {
            "THEMESMITH_TEMPLATE_URL": "https://example.com/starter.git",
            "THEMESMITH_TEMPLATE_BRANCH": " main ",
            "THEMESMITH_PACKAGE_MANAGER": "",
        }
    )
    assert settings.template_url == "https://example.com/starter.git"
    assert settings.template_branch == "main"
    assert settings.package_manager == "npm"


def test_with_overrides_ignores_none():
    settings = ScaffoldSettings().with_overrides(package_manager="pnpm", template_branch=None)
    assert settings.package_manager == "pnpm"
    assert settings.template_branch == "npx"


def test_with_overrides_rejects_unknown_fields():
    with pytest.raises(TypeError):
        ScaffoldSettings().with_overrides(colour="blue")


def test_project_paths_for_target():
    paths = ProjectPaths.for_target("my-theme")
    assert paths.root == Path("my-theme")
    assert paths.package_sample == Path("my-theme/package-sample.json")
    assert paths.composer_includes == Path("my-theme/includes/composer.json")
    assert paths.repo_history == Path("my-theme/.git")
    assert paths.manifests == (
        Path("my-theme/package.json"),
        Path("my-theme/composer.json"),
        Path("my-theme/includes/composer.json"),
    )


def test_resolve_readme_finds_uppercase_variant(tmp_path: Path):
    (tmp_path / "README.md").write_text("hi", encoding="utf-8")
    paths = ProjectPaths.for_target(tmp_path)
    assert paths.resolve_readme().name.lower() == "readme.md"
    assert paths.resolve_readme().read_text(encoding="utf-8") == "hi"

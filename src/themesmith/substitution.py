"""Find and replace placeholder tokens across the cloned template."""

from __future__ import annotations

import fnmatch
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Pattern, Sequence, Union

from .answers import AnswerSet
from .config import ProjectPaths, ScaffoldSettings
from .errors import SubstitutionError

__all__ = [
    "BANNER_PATTERN",
    "SubstitutionPass",
    "build_plan",
    "run_plan",
]


LOGGER = logging.getLogger(__name__)

TokenPattern = Union[str, Pattern[str]]
FileSelector = Union[str, Path]

TEXT_DOMAIN_TOKEN = "wp-theme-starter-text-domain"
FUNC_PREFIX_TOKEN = "wp_theme_starter_"
CLASS_PREFIX_TOKEN = "WP_Theme_Starter_"
KEYWORDS_TOKEN = "<theme_keywords>"
BANNER_PATTERN = re.compile(r"<!-- start_banner.*end_banner -->", re.IGNORECASE | re.MULTILINE | re.DOTALL)

_GLOB_CHARS = re.compile(r"[*?\[]")


def _token(name: str) -> Pattern[str]:
    return re.compile(re.escape(f"<theme_{name}>"))


def _is_glob(selector: FileSelector) -> bool:
    return isinstance(selector, str) and bool(_GLOB_CHARS.search(selector))


def _is_ignored(relative: str, ignore: Sequence[str]) -> bool:
    return any(
        fnmatch.fnmatchcase(relative, pattern) or fnmatch.fnmatchcase(f"/{relative}", pattern)
        for pattern in ignore
    )


def _replace(text: str, pattern: TokenPattern, replacement: str) -> str:
    if isinstance(pattern, str):
        return text.replace(pattern, replacement)
    return pattern.sub(lambda _match: replacement, text)


@dataclass(frozen=True, slots=True)
class SubstitutionPass:
    """One ordered find/replace step over a set of files.

    ``files`` holds explicit paths and glob patterns; globs are resolved
    relative to ``root``. ``patterns`` and ``replacements`` are parallel:
    string patterns are replaced literally, compiled patterns replace every
    match. Files matching an ``ignore`` glob are skipped.
    """

    name: str
    files: tuple[FileSelector, ...]
    patterns: tuple[TokenPattern, ...]
    replacements: tuple[str, ...]
    ignore: tuple[str, ...] = ()
    root: Path | None = None

    def __post_init__(self) -> None:
        if len(self.patterns) != len(self.replacements):
            raise ValueError(
                f"pass '{self.name}' has {len(self.patterns)} patterns "
                f"but {len(self.replacements)} replacements"
            )

    def resolve_files(self) -> list[Path]:
        """Return the files selected by this pass, in selector order."""

        root = self.root or Path.cwd()
        resolved: list[Path] = []
        for selector in self.files:
            if _is_glob(selector):
                matches = sorted(path for path in root.glob(str(selector)) if path.is_file())
                matches = [
                    path
                    for path in matches
                    if not _is_ignored(path.relative_to(root).as_posix(), self.ignore)
                ]
                if not matches:
                    raise SubstitutionError(f"no files match the pattern '{selector}'")
                candidates: Iterable[Path] = matches
            else:
                path = Path(selector)
                if not path.is_file():
                    raise SubstitutionError(f"file not found: {path}")
                candidates = [path]

            for candidate in candidates:
                if candidate not in resolved:
                    resolved.append(candidate)
        return resolved

    def apply(self) -> list[Path]:
        """Run the replacements and return the files whose contents changed."""

        changed: list[Path] = []
        for path in self.resolve_files():
            try:
                original = path.read_bytes().decode("utf-8", errors="surrogateescape")
            except OSError as exc:
                raise SubstitutionError(f"unable to read {path}: {exc}") from exc

            text = original
            for pattern, replacement in zip(self.patterns, self.replacements):
                text = _replace(text, pattern, replacement)

            if text != original:
                path.write_bytes(text.encode("utf-8", errors="surrogateescape"))
                changed.append(path)
        return changed


def build_plan(
    answers: AnswerSet, paths: ProjectPaths, settings: ScaffoldSettings | None = None
) -> list[SubstitutionPass]:
    """Return the ordered passes that customise a cloned template."""

    settings = settings or ScaffoldSettings()
    metadata_files = (paths.style_css, *paths.manifests)

    banner = (
        f"# {answers.display_name}\n\n{answers.description}\n\n"
        f"Based on [Denman WP Theme Starter]({settings.template_homepage})\n\n"
    )

    return [
        SubstitutionPass(
            name="metadata",
            files=metadata_files,
            patterns=(
                _token("slug"),
                _token("display_name"),
                _token("description"),
                _token("author_name"),
                _token("author_uri"),
                _token("author_slug"),
                _token("github_uri"),
                _token("uri"),
                re.compile(re.escape(TEXT_DOMAIN_TOKEN)),
            ),
            replacements=(
                answers.slug,
                answers.display_name,
                answers.description,
                answers.author_name,
                answers.author_uri,
                answers.author_slug,
                answers.github_uri,
                answers.uri,
                answers.text_domain,
            ),
        ),
        SubstitutionPass(
            name="stylesheet keywords",
            files=(paths.style_css,),
            patterns=(KEYWORDS_TOKEN,),
            replacements=(answers.keywords,),
        ),
        SubstitutionPass(
            name="manifest keywords",
            files=paths.manifests,
            patterns=(f'"{KEYWORDS_TOKEN}"',),
            replacements=(answers.quoted_keywords(),),
        ),
        SubstitutionPass(
            name="php sources",
            files=("**/*.php",),
            patterns=(
                _token("slug"),
                re.compile(re.escape(TEXT_DOMAIN_TOKEN)),
                re.compile(re.escape(FUNC_PREFIX_TOKEN)),
                re.compile(re.escape(CLASS_PREFIX_TOKEN)),
            ),
            replacements=(
                answers.slug,
                answers.text_domain,
                answers.func_prefix,
                answers.class_prefix,
            ),
            ignore=("**/vendor/**",),
            root=paths.root,
        ),
        SubstitutionPass(
            name="readme banner",
            files=(paths.resolve_readme(),),
            patterns=(BANNER_PATTERN,),
            replacements=(banner,),
        ),
    ]


def run_plan(plan: Sequence[SubstitutionPass]) -> dict[str, list[Path]]:
    """Apply ``plan`` in order, stopping at the first pass that fails.

    Passes that already ran are not rolled back when a later one raises
    :class:`~themesmith.errors.SubstitutionError`.
    """

    results: dict[str, list[Path]] = {}
    for substitution in plan:
        changed = substitution.apply()
        LOGGER.debug("pass %r changed %d file(s)", substitution.name, len(changed))
        results[substitution.name] = changed
    return results

"""Command line interface for creating a new theme."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Callable, Mapping, Sequence

from .commands import CommandRunner
from .config import ScaffoldSettings
from .errors import PromptAborted, ScaffoldError
from .pipeline import ThemeScaffolder
from .prompts import Prompter, build_questions, collect_answers

LOGGER = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_ABORTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themesmith",
        description="Create a new WordPress theme from the starter template",
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Directory to create the theme in (defaults to the theme slug)",
    )
    parser.add_argument("--template-url", help="Git remote of the template repository")
    parser.add_argument("--branch", help="Template branch to clone")
    parser.add_argument("--package-manager", help="Executable used to install dependencies")
    parser.add_argument(
        "--no-install",
        action="store_true",
        help="Do not install dependencies after scaffolding",
    )
    parser.add_argument(
        "--defaults",
        action="store_true",
        help="Accept every default answer without prompting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def _settings_from_args(args: argparse.Namespace, env: Mapping[str, str] | None) -> ScaffoldSettings:
    return ScaffoldSettings.from_env(env).with_overrides(
        template_url=args.template_url,
        template_branch=args.branch,
        package_manager=args.package_manager,
        install=False if args.no_install else None,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    input_func: Callable[[str], str] = input,
    runner: CommandRunner | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    settings = _settings_from_args(args, env)
    prompter = Prompter(input_func, accept_defaults=args.defaults)

    try:
        answers = collect_answers(build_questions(args.target, settings), prompter)
    except PromptAborted:
        LOGGER.error("Aborted")
        return EXIT_ABORTED
    except ScaffoldError as exc:
        LOGGER.error("%s", exc)
        return EXIT_FAILURE

    target = args.target or answers.slug
    scaffolder = ThemeScaffolder(settings, runner)
    try:
        result = asyncio.run(scaffolder.run(answers, target))
    except ScaffoldError as exc:
        LOGGER.error("%s", exc)
        return EXIT_FAILURE

    print("\nCongratulations! Use the following commands to get started:")
    print(f"\n\t{scaffolder.next_steps(result.paths, installed=result.installed)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

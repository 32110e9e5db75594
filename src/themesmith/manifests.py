"""Promote ``*-sample.json`` manifests over the template's own manifests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .config import ProjectPaths

__all__ = ["ManifestPair", "manifest_pairs", "promote_manifest", "promote_manifests"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ManifestPair:
    active: Path
    sample: Path

    @property
    def label(self) -> str:
        return self.active.name


def manifest_pairs(paths: ProjectPaths) -> list[ManifestPair]:
    return [
        ManifestPair(paths.package, paths.package_sample),
        ManifestPair(paths.composer, paths.composer_sample),
        ManifestPair(paths.composer_includes, paths.composer_includes_sample),
    ]


def promote_manifest(pair: ManifestPair) -> None:
    """Replace ``pair.active`` with ``pair.sample``.

    Raises :class:`FileNotFoundError` when the sample does not exist, in which
    case the active manifest is left untouched.
    """

    if not pair.sample.is_file():
        raise FileNotFoundError(pair.sample)
    if pair.active.exists():
        pair.active.unlink()
    pair.sample.rename(pair.active)


def promote_manifests(pairs: Iterable[ManifestPair]) -> list[ManifestPair]:
    """Promote every pair that can be promoted and return those that were."""

    promoted: list[ManifestPair] = []
    for pair in pairs:
        try:
            promote_manifest(pair)
        except OSError as exc:
            LOGGER.error(
                "Unable to generate new %s from %s: %s", pair.label, pair.sample.name, exc
            )
            continue
        LOGGER.info("Generated new %s from %s", pair.active, pair.sample.name)
        promoted.append(pair)
    return promoted

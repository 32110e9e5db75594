from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.fixtures.theme_template import FakeRunner

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def runner() -> FakeRunner:
    """Fake command runner that clones the fixture template."""

    return FakeRunner()

import json
import random
from pathlib import Path

import pytest


class ConstantRandom(random.Random):
    """Random source whose every draw is zero: choices always pick the first item."""

    def getrandbits(self, k: int) -> int:
        return 0


class StubPhrases:
    """Phrase source returning fixed clauses and counting how often it is asked."""

    def __init__(self, attribution: str = "", insertion: str = ""):
        self._attribution = attribution
        self._insertion = insertion
        self.calls = 0

    def attribution(self) -> str:
        self.calls += 1
        return self._attribution

    def insertion(self) -> str:
        return self._insertion


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "citations.json").write_text(
        json.dumps(["Citation A", "Citation B"]), encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def constant_rng() -> ConstantRandom:
    return ConstantRandom()


@pytest.fixture
def stub_phrases():
    """Factory for phrase sources with fixed clauses."""

    return StubPhrases

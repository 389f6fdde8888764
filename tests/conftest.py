"""Shared fixtures for the wordlist pipeline tests."""

from __future__ import annotations

from typing import Dict

import pytest


class DictMorphology:
    """Morphology stand-in driven by an explicit plural -> singular map."""

    def __init__(self, plurals: Dict[str, str]) -> None:
        self.to_singular = dict(plurals)
        self.to_plural = {s: p for p, s in plurals.items()}

    def singular(self, word: str) -> str:
        return self.to_singular.get(word, word)

    def plural(self, word: str) -> str:
        return self.to_plural.get(word, word)


@pytest.fixture
def morphology() -> DictMorphology:
    return DictMorphology({"cats": "cat", "dogs": "dog", "boxes": "box", "mice": "mouse"})

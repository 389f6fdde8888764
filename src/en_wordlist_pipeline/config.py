"""
config.py

What this file does:
- Holds the static knobs of the wordlist pipeline (token length limits,
  default lemma list location).
- Provides WordlistConfig, the frozen bundle of those knobs a Wordlist is built with.

How it fits:
- Library code never guesses where the lemma list lives: callers pass a path
  (or set lemma_path here) and the Wordlist loads it once at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional

# Tokens longer than this are treated as noise (URLs, hashes, glued words)
MAX_TOKEN_LEN = 20

# Tokens shorter than this after punctuation stripping are dropped
MIN_TOKEN_LEN = 2

DEFAULT_LEMMA_PATH = Path("data/lemmatization-en.txt")


@dataclass(frozen=True)
class WordlistConfig:
    max_token_len: int = MAX_TOKEN_LEN
    min_token_len: int = MIN_TOKEN_LEN
    extra_stop_words: FrozenSet[str] = field(default_factory=frozenset)
    lemma_path: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.max_token_len < 1:
            raise ValueError(f"max_token_len must be >= 1, got {self.max_token_len}")
        if self.min_token_len < 1:
            raise ValueError(f"min_token_len must be >= 1, got {self.min_token_len}")
        # accept any iterable of words, store them case-folded
        object.__setattr__(
            self,
            "extra_stop_words",
            frozenset(w.strip().lower() for w in self.extra_stop_words if w.strip()),
        )
        if self.lemma_path is not None:
            object.__setattr__(self, "lemma_path", Path(self.lemma_path))

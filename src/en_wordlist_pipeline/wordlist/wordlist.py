"""
wordlist/wordlist.py

Orchestrates one frequency-weighted wordlist:
  1) Load the lemma list once (fatal if it cannot be read)
  2) For every raw token:
     - normalize (lower-case, validate, singularize, strip punctuation,
       lemmatize, drop stop words)
     - increment the shared FrequencyTable
  3) Answer queries: vocabulary (plural-expanded), distribution, snapshot,
     top-N, pandas frame

Ingestion entry points:
- ingest(tokens)      any iterable of raw tokens (may be a lazy generator)
- ingest_text(text)   plain text, split on whitespace
- ingest_html(page)   HTML bytes/str, sanitized first, then split on whitespace

All entry points are safe to call from several threads against the same
Wordlist; the table lock is taken per token, not per call.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

import pandas as pd

from ..config import WordlistConfig
from ..lexicon.lemmas import LemmaTable
from ..text.morphology import InflectionMorphology, Morphology
from ..text.normalize import TokenNormalizer
from ..text.sanitize import BeautifulSoupSanitizer, Sanitizer
from ..text.tokenize import iter_tokens
from ..vocab.state import FrequencySnapshot, FrequencyTable


class Wordlist:
    """
    Lemmas come from exactly one place: the `lemmas` argument, or
    config.lemma_path, or nowhere (empty table). Passing both is a ValueError.
    """

    def __init__(
        self,
        lemmas: Optional[LemmaTable] = None,
        *,
        config: Optional[WordlistConfig] = None,
        morphology: Optional[Morphology] = None,
        sanitizer: Optional[Sanitizer] = None,
        debug_print: bool = False,
    ) -> None:
        self.config = config if config is not None else WordlistConfig()

        if lemmas is not None and self.config.lemma_path is not None:
            raise ValueError(
                f"Got both a LemmaTable and config.lemma_path={self.config.lemma_path}; pass one of them."
            )
        if lemmas is None:
            if self.config.lemma_path is not None:
                lemmas = LemmaTable.from_path(self.config.lemma_path, debug_print=debug_print)
            else:
                lemmas = LemmaTable.empty()
        self.lemmas = lemmas

        self.morphology: Morphology = morphology if morphology is not None else InflectionMorphology()
        self.sanitizer: Sanitizer = sanitizer if sanitizer is not None else BeautifulSoupSanitizer()
        # guards every read and write of the table
        self._lock = threading.Lock()
        self.table = FrequencyTable(lock=self._lock)
        self.normalizer = TokenNormalizer(
            lemmas=self.lemmas,
            morphology=self.morphology,
            extra_stop_words=self.config.extra_stop_words,
            max_len=self.config.max_token_len,
            min_len=self.config.min_token_len,
        )

    @classmethod
    def from_lemma_file(cls, path: str | Path, **kwargs) -> "Wordlist":
        debug_print = kwargs.get("debug_print", False)
        return cls(LemmaTable.from_path(path, debug_print=debug_print), **kwargs)

    # -----------------------------
    # Ingestion
    # -----------------------------
    def ingest(self, tokens: Iterable[str]) -> int:
        """
        Counts every token that survives normalization.
        Returns how many tokens were counted by this call.
        """
        counted = 0
        for text in self.normalizer.normalize_all(tokens):
            self.table.increment(text)
            counted += 1
        return counted

    def ingest_text(self, text: str) -> int:
        return self.ingest(iter_tokens(text))

    def ingest_html(self, page: Union[bytes, str]) -> int:
        if isinstance(page, str):
            page = page.encode("utf-8")
        clean = self.sanitizer.sanitize(page)
        return self.ingest_text(clean.decode("utf-8", errors="ignore"))

    # -----------------------------
    # Queries
    # -----------------------------
    def vocabulary(self) -> Set[str]:
        return self.table.vocabulary(self.morphology)

    def distribution(self) -> Dict[str, float]:
        return self.table.distribution()

    def snapshot(self) -> FrequencySnapshot:
        return self.table.snapshot()

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        return self.table.most_common(n)

    def to_frame(self) -> pd.DataFrame:
        return self.table.to_frame()

    @property
    def total(self) -> int:
        return self.table.total

    def __len__(self) -> int:
        return len(self.table)

"""
text/normalize.py

What this file does:
- Turns one raw token into its canonical counted form, or drops it.

Pipeline (order matters):
  1) lower-case
  2) drop if is_invalid()              (checked on the raw lower-cased form)
  3) singularize                       (Morphology)
  4) clear_word()                      (punctuation/brackets/quotes removed)
  5) drop if shorter than min_len
  6) lemma lookup                      (LemmaTable)
  7) drop stop words
  8) canonical token

How it fits:
- Wordlist runs every ingested token through a TokenNormalizer and increments
  the FrequencyTable for each survivor.
- The contract is "transform or drop": normalize() never raises for odd input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Iterable, Iterator, Optional

from ..config import MAX_TOKEN_LEN, MIN_TOKEN_LEN
from ..lexicon.lemmas import LemmaTable
from .morphology import Morphology
from .tokenize import clear_word
from .validate import is_invalid

STOP_WORDS: FrozenSet[str] = frozenset({
    "a", "the", "is", "are", "if", "what", "where", "of", "you", "me", "he", "she", "it", "to", "or", "can",
    "both", "and", "i", "from", "use", "let", "for", "add", "in", "be", "get", "either", "cannot", "do",
    "there", "no", "yes", "how", "on", "same", "any", "so", "allow", "up", "all", "own", "which", "per",
    "not", "with", "within", "we", "then", "than", "they", "this", "through", "when", "will", "because",
})


def is_stop_word(word: str, stop_words: AbstractSet[str] = STOP_WORDS) -> bool:
    return word in stop_words


@dataclass
class TokenNormalizer:
    lemmas: LemmaTable
    morphology: Morphology
    extra_stop_words: AbstractSet[str] = field(default_factory=frozenset)
    max_len: int = MAX_TOKEN_LEN
    min_len: int = MIN_TOKEN_LEN

    def __post_init__(self) -> None:
        self.stop_words: FrozenSet[str] = STOP_WORDS | frozenset(self.extra_stop_words)

    def normalize(self, raw: str) -> Optional[str]:
        """Returns the canonical form of `raw`, or None when the token is dropped."""
        text = raw.lower()
        if is_invalid(text, max_len=self.max_len):
            return None

        text = self.morphology.singular(text)
        text = clear_word(text)
        if len(text) < self.min_len:
            return None

        text = self.lemmas.lookup(text)
        if is_stop_word(text, self.stop_words):
            return None
        return text

    __call__ = normalize

    def normalize_all(self, tokens: Iterable[str]) -> Iterator[str]:
        for raw in tokens:
            text = self.normalize(raw)
            if text is not None:
                yield text

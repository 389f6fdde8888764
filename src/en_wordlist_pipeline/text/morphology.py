"""
text/morphology.py

What this file does:
- Wraps the `inflection` rule set behind two functions: singular(word), plural(word).

How it fits:
- TokenNormalizer singularizes every valid token before counting.
- FrequencyTable.vocabulary() adds each counted word's plural.
- Anything with the same two methods can be passed to Wordlist instead
  (tests use a tiny dict-based stand-in).

Notes:
- The rules know the singular endings -ss, -sis, -us ("glass", "analysis",
  "status" stay as they are); only real plural endings are rewritten.
- Function words ending in "s" are not special-cased: "this" -> "thi",
  "yes" -> "ye".
"""

from __future__ import annotations

from typing import Protocol

import inflection


class Morphology(Protocol):
    def singular(self, word: str) -> str:
        ...

    def plural(self, word: str) -> str:
        ...


class InflectionMorphology:
    def singular(self, word: str) -> str:
        if not word:
            return word
        return inflection.singularize(word)

    def plural(self, word: str) -> str:
        if not word:
            return word
        return inflection.pluralize(word)

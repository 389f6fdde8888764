"""
lexicon/lemmas.py

Purpose
-------
Load an English lemma list and provide a read-only lookup:

    inflected form -> lemma      ("running" -> "run", "went" -> "go")

File format
-----------
One record per line, two fields: `lemma<TAB>inflected`. Lists that use a single
space instead of a tab are accepted too. Anything that does not split into
exactly two fields is skipped (headers, comments, multi-word entries).

How it's used in the project
----------------------------
- Wordlist builds exactly one LemmaTable at construction and never mutates it.
- TokenNormalizer resolves every cleaned token through lookup().

Notes
-----
The whole table lives in memory. The usual English list is ~40k lines
(a few MB), which is fine; much larger lists should be filtered first.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, TextIO, Tuple


def parse_lemma_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Returns (lemma, inflected) or None when the line is not a two-field record.
    Tab is tried first, then a single space.
    """
    line = line.rstrip("\r\n")
    fields = line.split("\t")
    if len(fields) != 2:
        fields = line.split(" ")
        if len(fields) != 2:
            return None
    lemma, inflected = fields[0].strip(), fields[1].strip()
    if not lemma or not inflected:
        return None
    return lemma, inflected


class LemmaTable:
    """
    Immutable mapping inflected form -> lemma.
    """

    __slots__ = ("_lemmas",)

    def __init__(self, lemmas: Mapping[str, str]) -> None:
        self._lemmas: Mapping[str, str] = MappingProxyType(dict(lemmas))

    @classmethod
    def empty(cls) -> "LemmaTable":
        return cls({})

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LemmaTable":
        lemmas: Dict[str, str] = {}
        for line in lines:
            rec = parse_lemma_line(line)
            if rec is None:
                continue
            lemma, inflected = rec
            lemmas[inflected] = lemma
        return cls(lemmas)

    @classmethod
    def from_stream(cls, stream: TextIO) -> "LemmaTable":
        return cls.from_lines(stream)

    @classmethod
    def from_path(cls, path: str | Path, debug_print: bool = False) -> "LemmaTable":
        path = Path(path)
        if not os.path.exists(path):
            raise FileNotFoundError(f"Lemma file not found: {path}")

        with path.open("r", encoding="utf-8") as f:
            table = cls.from_stream(f)

        if debug_print:
            print(f"[lemmas] loaded {len(table)} entries from {path}")
        return table

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._lemmas

    def lookup(self, word: str) -> str:
        """Returns the lemma of `word`, or `word` itself when it is not listed."""
        return self._lemmas.get(word, word)

    def get(self, word: str, default: Optional[str] = None) -> Optional[str]:
        return self._lemmas.get(word, default)

    def __contains__(self, word: object) -> bool:
        return word in self._lemmas

    def __len__(self) -> int:
        return len(self._lemmas)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lemmas)

    def __repr__(self) -> str:
        return f"LemmaTable(entries={len(self._lemmas)})"

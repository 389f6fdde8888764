"""
text/tokenize.py

What this file does:
- Splits plain text into raw whitespace-delimited tokens (lazily).
- Removes punctuation/bracket/quote characters from a token (clear_word).

How it fits:
- Wordlist.ingest_text / ingest_html feed iter_tokens() into the normalizer.
- TokenNormalizer calls clear_word() after singularization.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, TextIO

# Deleted everywhere in the token, not only at the edges
CLEAR_SYMBOLS = (".", "!", "?", ",", "(", ")", "[", "]", '"', "'", ";", ":", "{", "}")

_CLEAR_TABLE = str.maketrans("", "", "".join(CLEAR_SYMBOLS))

_TOKEN_RE = re.compile(r"\S+")


def iter_tokens(text: str) -> Iterator[str]:
  for m in _TOKEN_RE.finditer(text or ""):
    yield m.group(0)

def iter_tokens_from_lines(lines: Iterable[str]) -> Iterator[str]:
  for line in lines:
    yield from iter_tokens(line)

def iter_tokens_from_stream(stream: TextIO) -> Iterator[str]:
  return iter_tokens_from_lines(stream)

def clear_word(token: str) -> str:
  return token.translate(_CLEAR_TABLE)

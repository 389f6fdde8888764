"""
text/validate.py

What this file does:
- Decides whether a raw (already lower-cased) token is noise.

A token is invalid when it is too long, is not plain ASCII, contains a
non-printable character, or contains one of INVALID_SYMBOLS (URL pieces,
hex prefixes, markup leftovers, typographic quotes).

How it fits:
- TokenNormalizer calls is_invalid() right after case-folding and before any
  transformation, so symbol-laden tokens never reach the morphology engine.
"""

from __future__ import annotations

from typing import Tuple

from ..config import MAX_TOKEN_LEN

INVALID_SYMBOLS: Tuple[str, ...] = (
    "&", "#", "|", "/", "www", "http", "%", "@", "'", "’", "”",
    "+", "=", "0x", "x0", "_", "\\",
)


def is_ascii_safe(token: str) -> bool:
    # repr() keeps printable non-ASCII characters, ascii() escapes them
    if len(token.encode("utf-8")) != len(token):
        return False
    return repr(token) == ascii(token)


def has_invalid_symbol(token: str) -> bool:
    return any(s in token for s in INVALID_SYMBOLS)


def is_invalid(token: str, max_len: int = MAX_TOKEN_LEN) -> bool:
    if len(token) > max_len:
        return True
    if not is_ascii_safe(token):
        return True
    if not token.isprintable():
        return True
    return has_invalid_symbol(token)

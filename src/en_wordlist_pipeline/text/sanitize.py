"""
text/sanitize.py

What this file does:
- Strips an HTML (or HTML-ish) document down to whitespace-separated plain text.

How it fits:
- Wordlist.ingest_html() runs the page through a Sanitizer, then tokenizes
  the result on whitespace.
- Script/style bodies are removed entirely; every other tag is unwrapped and
  its text kept.
- The text comes back HTML-escaped: entities in the source (&lt;div&gt;, &quot;)
  stay entities, so the validator's "&" rule drops them as noise.
"""

from __future__ import annotations

import html
import re
from typing import Protocol, Union

from bs4 import BeautifulSoup

# Elements whose text is never prose
_DROP_TAGS = ("script", "style", "noscript", "template")

_WS_RE = re.compile(r"\s+")


class Sanitizer(Protocol):
    def sanitize(self, page: bytes) -> bytes:
        ...


class BeautifulSoupSanitizer:
    def __init__(self, parser: str = "html.parser") -> None:
        self.parser = parser

    def sanitize_text(self, page: Union[bytes, str]) -> str:
        if not page:
            return ""
        soup = BeautifulSoup(page, self.parser)
        for tag in soup(list(_DROP_TAGS)):
            tag.decompose()
        text = soup.get_text(separator=" ")
        return _WS_RE.sub(" ", text).strip()

    def sanitize(self, page: Union[bytes, str]) -> bytes:
        return html.escape(self.sanitize_text(page)).encode("utf-8")

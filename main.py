"""
main.py

What this file does:
- Builds a wordlist from one HTML page and prints the 30 most frequent words.

How to run:
- From project root:
  PYTHONPATH=src python main.py
or, for more options:
  PYTHONPATH=src python scripts/build_wordlist.py --help
"""

from __future__ import annotations

from pathlib import Path

from en_wordlist_pipeline.config import DEFAULT_LEMMA_PATH, WordlistConfig
from en_wordlist_pipeline.wordlist.wordlist import Wordlist

if __name__ == "__main__":
    page_path = Path("data/page.html")             # <-- change if needed
    lemma_path = DEFAULT_LEMMA_PATH if DEFAULT_LEMMA_PATH.exists() else None

    wl = Wordlist(config=WordlistConfig(lemma_path=lemma_path), debug_print=True)
    wl.ingest_html(page_path.read_bytes())

    for word, count in wl.most_common(30):
        print(f"{count:>6}  {word}")
    print(f"✅ {len(wl)} distinct words from {page_path}")

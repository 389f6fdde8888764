#!/usr/bin/env python3
"""
build_wordlist.py

Purpose:
  Build a frequency-weighted English wordlist from text and/or HTML files.

Input:
  - One or more files. *.html / *.htm / *.xhtml are sanitized as HTML,
    everything else is read as plain text (override with --html / --text).
  - Optional lemma list (lemma<TAB>inflected per line).

Output:
  - CSV: word,count,probability (most frequent first), or
  - top-N table on stdout with --top and no --out
  - --vocab writes the plural-expanded vocabulary, one word per line

Usage:
  PYTHONPATH=src python scripts/build_wordlist.py pages/*.html \
    --lemmas data/lemmatization-en.txt \
    --out data/wordlist.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from en_wordlist_pipeline.config import WordlistConfig
from en_wordlist_pipeline.wordlist.wordlist import Wordlist

HTML_SUFFIXES = {".html", ".htm", ".xhtml"}


def ingest_file(wl: Wordlist, path: Path, mode: str) -> int:
  as_html = mode == "html" or (mode == "auto" and path.suffix.lower() in HTML_SUFFIXES)
  if as_html:
    return wl.ingest_html(path.read_bytes())
  return wl.ingest_text(path.read_text(encoding="utf-8", errors="ignore"))


def main(argv: Optional[List[str]] = None) -> int:
  ap = argparse.ArgumentParser()
  ap.add_argument("inputs", nargs="+", help="Text or HTML files to ingest.")
  ap.add_argument("--lemmas", default=None, help="Lemma list path (lemma<TAB>inflected per line).")
  ap.add_argument("--out", default=None, help="Output CSV path (word,count,probability).")
  ap.add_argument("--vocab", default=None, help="Output path for the plural-expanded vocabulary.")
  ap.add_argument("--top", type=int, default=50, help="Rows to print when --out is not given.")
  ap.add_argument("--stop-word", action="append", default=[], help="Extra stop word (repeatable).")
  ap.add_argument("--max-token-len", type=int, default=20)
  ap.add_argument("--min-token-len", type=int, default=2)

  group = ap.add_mutually_exclusive_group()
  group.add_argument("--html", dest="mode", action="store_const", const="html", help="Treat every input as HTML.")
  group.add_argument("--text", dest="mode", action="store_const", const="text", help="Treat every input as plain text.")
  ap.set_defaults(mode="auto")

  args = ap.parse_args(argv)

  try:
    cfg = WordlistConfig(
      max_token_len=args.max_token_len,
      min_token_len=args.min_token_len,
      extra_stop_words=frozenset(args.stop_word),
      lemma_path=Path(args.lemmas) if args.lemmas else None,
    )
  except ValueError as e:
    ap.error(str(e))

  wl = Wordlist(config=cfg, debug_print=True)

  for raw in args.inputs:
    path = Path(raw)
    if not path.is_file():
      print(f"[wordlist] skipping missing input: {path}", file=sys.stderr)
      continue
    n = ingest_file(wl, path, args.mode)
    print(f"[wordlist] {path}: counted {n} tokens", file=sys.stderr)

  df = wl.to_frame()
  if args.out:
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False, encoding="utf-8")
  else:
    print(df.head(args.top).to_string(index=False))

  if args.vocab:
    vocab_path = Path(args.vocab)
    vocab_path.parent.mkdir(parents=True, exist_ok=True)
    vocab_path.write_text("".join(w + "\n" for w in sorted(wl.vocabulary())), encoding="utf-8")

  print(f"✅ {len(wl)} distinct words, {wl.total} tokens counted", file=sys.stderr)
  return 0


if __name__ == "__main__":
  sys.exit(main())

"""
vocab/state.py

What this file does:
- Counts canonical token occurrences (one increment at a time) and keeps the
  running total.
- Derives the read-side views: snapshot, probability distribution,
  plural-expanded vocabulary, top-N, pandas frame.

Concurrency:
- One lock per table. It is held for a single increment or a single full read,
  never across a whole document, so concurrent ingestions interleave without
  lost updates (a reader may see a half-ingested document).
- total == sum(counts) whenever the lock is free.

Empty table:
- distribution() of an empty table is {} (nothing to normalize against).
"""

from __future__ import annotations

import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

import pandas as pd

from ..text.morphology import Morphology

FRAME_COLUMNS = ["word", "count", "probability"]


@dataclass(frozen=True)
class FrequencySnapshot:
  counts: Dict[str, int]
  total: int

  def distribution(self) -> Dict[str, float]:
    if self.total <= 0:
      return {}
    t = float(self.total)
    return {w: c / t for w, c in self.counts.items()}


class FrequencyTable:
  """
  Mutable, lock-guarded token -> count table.

  Grows monotonically: there is no decrement and no removal.
  """

  def __init__(self, lock: Optional[threading.Lock] = None) -> None:
    self._counts: Counter[str] = Counter()
    self._total = 0
    self._lock = lock if lock is not None else threading.Lock()

  def increment(self, token: str) -> None:
    with self._lock:
      self._counts[token] += 1
      self._total += 1

  def snapshot(self) -> FrequencySnapshot:
    with self._lock:
      return FrequencySnapshot(dict(self._counts), self._total)

  def distribution(self) -> Dict[str, float]:
    with self._lock:
      if self._total == 0:
        return {}
      t = float(self._total)
      return {w: c / t for w, c in self._counts.items()}

  def vocabulary(self, morphology: Morphology) -> Set[str]:
    """
    Counted words plus the plural of each one when it differs
    ("cat" counted -> {"cat", "cats"}).
    """
    with self._lock:
      out: Set[str] = set()
      for w in self._counts:
        out.add(w)
        p = morphology.plural(w)
        if p != w:
          out.add(p)
      return out

  def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
    with self._lock:
      return self._counts.most_common(n)

  def count(self, token: str) -> int:
    with self._lock:
      return self._counts.get(token, 0)

  @property
  def total(self) -> int:
    with self._lock:
      return self._total

  def to_frame(self) -> pd.DataFrame:
    """
    word / count / probability, most frequent first (ties by word).
    """
    snap = self.snapshot()
    if snap.total == 0:
      return pd.DataFrame(columns=FRAME_COLUMNS)

    df = pd.DataFrame(
      [(w, c, c / snap.total) for w, c in snap.counts.items()],
      columns=FRAME_COLUMNS,
    )
    df = df.sort_values(["count", "word"], ascending=[False, True], kind="mergesort")
    return df.reset_index(drop=True)

  def __len__(self) -> int:
    with self._lock:
      return len(self._counts)

  def __contains__(self, token: object) -> bool:
    with self._lock:
      return token in self._counts

"""Tests for the lock-guarded frequency table."""

from __future__ import annotations

import threading

import pytest

from en_wordlist_pipeline.vocab.state import FRAME_COLUMNS, FrequencyTable


def test_increment_n_times_counts_n() -> None:
    table = FrequencyTable()
    for _ in range(7):
        table.increment("cat")
    table.increment("dog")
    assert table.count("cat") == 7
    assert table.count("dog") == 1
    assert table.count("bird") == 0
    assert table.total == 8
    assert len(table) == 2
    assert "cat" in table


def test_snapshot_is_a_consistent_copy() -> None:
    table = FrequencyTable()
    table.increment("cat")
    snap = table.snapshot()
    table.increment("cat")
    assert snap.counts == {"cat": 1}
    assert snap.total == 1
    assert sum(snap.counts.values()) == snap.total


def test_distribution_sums_to_one() -> None:
    table = FrequencyTable()
    for w in ["cat", "cat", "run", "run", "run", "box"]:
        table.increment(w)
    dist = table.distribution()
    assert dist["cat"] == pytest.approx(2 / 6)
    assert dist["run"] == pytest.approx(0.5)
    assert sum(dist.values()) == pytest.approx(1.0)
    assert all(0.0 <= p <= 1.0 for p in dist.values())


def test_distribution_of_empty_table_is_empty() -> None:
    table = FrequencyTable()
    assert table.distribution() == {}
    assert table.snapshot().distribution() == {}


def test_vocabulary_adds_distinct_plurals(morphology) -> None:
    table = FrequencyTable()
    for w in ["cat", "mouse", "run"]:
        table.increment(w)
    assert table.vocabulary(morphology) == {"cat", "cats", "mouse", "mice", "run"}


def test_most_common() -> None:
    table = FrequencyTable()
    for w in ["a1", "b1", "b1", "c1", "c1", "c1"]:
        table.increment(w)
    assert table.most_common(2) == [("c1", 3), ("b1", 2)]
    assert len(table.most_common()) == 3


def test_to_frame_sorted_by_count_then_word() -> None:
    table = FrequencyTable()
    for w in ["dog", "cat", "run", "run"]:
        table.increment(w)
    df = table.to_frame()
    assert list(df.columns) == FRAME_COLUMNS
    assert list(df["word"]) == ["run", "cat", "dog"]
    assert list(df["count"]) == [2, 1, 1]
    assert df["probability"].sum() == pytest.approx(1.0)


def test_to_frame_of_empty_table() -> None:
    df = FrequencyTable().to_frame()
    assert list(df.columns) == FRAME_COLUMNS
    assert len(df) == 0


def test_concurrent_increments_lose_nothing() -> None:
    table = FrequencyTable()
    n_threads, per_thread = 8, 2000

    def worker() -> None:
        for i in range(per_thread):
            table.increment("even" if i % 2 == 0 else "odd")

    threads = [threading.Thread(target=worker) for _ in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert table.total == n_threads * per_thread
    assert table.count("even") == table.count("odd") == n_threads * per_thread // 2

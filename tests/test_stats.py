"""Tests for docdiff.services.stats: per-kind tallies."""

from __future__ import annotations

from docdiff.models.diff import DiffEntry, DiffKind, DiffStats
from docdiff.services.stats import aggregate


def test_empty_entries() -> None:
    assert aggregate([]) == DiffStats(added=0, removed=0, unchanged=0, total=0)


def test_counts_each_kind() -> None:
    entries = [
        DiffEntry(kind=DiffKind.UNCHANGED, original_text="a", modified_text="a",
                  original_line_number=1, modified_line_number=1),
        DiffEntry(kind=DiffKind.ADDED, modified_text="b", modified_line_number=2),
        DiffEntry(kind=DiffKind.REMOVED, original_text="c", original_line_number=2),
        DiffEntry(kind=DiffKind.MODIFIED, original_text="d", modified_text="e",
                  original_line_number=3, modified_line_number=3),
    ]
    stats = aggregate(entries)
    assert stats == DiffStats(added=1, removed=1, unchanged=1, total=4)


def test_modified_only_counts_toward_total() -> None:
    entry = DiffEntry(kind=DiffKind.MODIFIED, original_text="X", modified_text="Y",
                      original_line_number=1, modified_line_number=1)
    stats = aggregate([entry, entry])
    assert (stats.added, stats.removed, stats.unchanged, stats.total) == (0, 0, 0, 2)


def test_accepts_any_iterable() -> None:
    entries = (
        DiffEntry(kind=DiffKind.ADDED, modified_text=str(n), modified_line_number=n)
        for n in range(1, 4)
    )
    assert aggregate(entries).added == 3

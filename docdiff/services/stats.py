"""
Stats Aggregator - Count diff entries per kind
"""

from __future__ import annotations

from typing import Iterable

from docdiff.models.diff import DiffEntry, DiffKind, DiffStats


def aggregate(entries: Iterable[DiffEntry]) -> DiffStats:
    """Tally entries by kind; Modified rows only count toward the total"""
    added = removed = unchanged = total = 0

    for entry in entries:
        total += 1
        if entry.kind == DiffKind.ADDED:
            added += 1
        elif entry.kind == DiffKind.REMOVED:
            removed += 1
        elif entry.kind == DiffKind.UNCHANGED:
            unchanged += 1

    return DiffStats(added=added, removed=removed, unchanged=unchanged, total=total)

"""
Diff Cache - Keep recent diff results keyed by a hash of their inputs
"""

from __future__ import annotations

import hashlib
import json
import threading
from collections import OrderedDict
from typing import Sequence

from docdiff.models.diff import DiffMode, DiffResult, TieBreak


class DiffCache:
    """
    Least-recently-used cache of diff results (input hash -> DiffResult).

    Safe to share between the worker threads that run diffs.
    """

    def __init__(self, max_entries: int = 128):
        if max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        self.max_entries = max_entries
        self._results: OrderedDict[str, DiffResult] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key_for(
        original: Sequence[str],
        modified: Sequence[str],
        mode: DiffMode,
        tie_break: TieBreak,
    ) -> str:
        """Stable key for a comparison: SHA-256 of its canonical JSON form"""
        payload = json.dumps(
            [DiffMode(mode).value, TieBreak(tie_break).value, list(original), list(modified)],
            ensure_ascii=False,
            separators=(",", ":"),
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def get(self, key: str) -> DiffResult | None:
        """Return the cached result for key, or None"""
        with self._lock:
            result = self._results.get(key)
            if result is None:
                self.misses += 1
                return None

            self._results.move_to_end(key)
            self.hits += 1
            return result

    def put(self, key: str, result: DiffResult):
        """Store a result, evicting the least recently used ones beyond capacity"""
        with self._lock:
            if self.max_entries == 0:
                return
            self._results[key] = result
            self._results.move_to_end(key)
            self._evict()

    def resize(self, max_entries: int):
        """Change capacity; shrinking evicts the oldest results"""
        if max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        with self._lock:
            self.max_entries = max_entries
            self._evict()

    def clear(self):
        with self._lock:
            self._results.clear()
            self.hits = 0
            self.misses = 0

    def _evict(self):
        # Caller holds the lock
        while len(self._results) > self.max_entries:
            self._results.popitem(last=False)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._results

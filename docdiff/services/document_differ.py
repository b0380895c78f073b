"""
Document Differ Service - Line-level comparison of two document trees
"""

from __future__ import annotations

from typing import Sequence

from docdiff.models.diff import DiffEntry, DiffMode, DiffResult, TieBreak
from docdiff.models.document import DocumentTree
from docdiff.services.lcs import compute_lcs
from docdiff.services.line_extractor import extract_lines
from docdiff.services.reconciler import reconcile, reconcile_strict
from docdiff.services.stats import aggregate


class DocumentDiffer:
    """Compare document trees: extract lines, reconcile against the LCS, count"""

    def __init__(
        self,
        mode: DiffMode = DiffMode.PAIRED,
        tie_break: TieBreak = TieBreak.CONSUME_MODIFIED,
    ):
        self.mode = DiffMode(mode)
        self.tie_break = TieBreak(tie_break)

    def diff_documents(self, original: DocumentTree, modified: DocumentTree) -> DiffResult:
        """Generate a diff result from two document trees"""
        return self.diff_lines(extract_lines(original), extract_lines(modified))

    def diff_lines(self, original: Sequence[str], modified: Sequence[str]) -> DiffResult:
        """Generate a diff result from two extracted line sequences"""
        entries = self._reconcile(original, modified)
        return DiffResult(entries=entries, stats=aggregate(entries))

    def _reconcile(self, original: Sequence[str], modified: Sequence[str]) -> list[DiffEntry]:
        if self.mode == DiffMode.STRICT:
            return reconcile_strict(original, modified, self.tie_break)

        lcs = compute_lcs(original, modified, self.tie_break)
        return reconcile(original, modified, lcs)


def diff_documents(original: DocumentTree, modified: DocumentTree) -> DiffResult:
    """Diff two document trees with the default settings"""
    return DocumentDiffer().diff_documents(original, modified)

"""Document Diff Backend - line-level comparison of rich-text document trees"""

from .models import DiffEntry, DiffKind, DiffMode, DiffResult, DiffStats, DocumentNode, TieBreak
from .services.document_differ import DocumentDiffer, diff_documents

__version__ = "1.0.0"

__all__ = [
    "DiffEntry",
    "DiffKind",
    "DiffMode",
    "DiffResult",
    "DiffStats",
    "DocumentDiffer",
    "DocumentNode",
    "TieBreak",
    "diff_documents",
]

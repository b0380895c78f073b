"""Models module - Pydantic data models"""

from .compare import (
    CompareRequest,
    ExtractRequest,
    ExtractResponse,
    LinesCompareRequest,
    StreamEvent,
)
from .diff import DiffEntry, DiffKind, DiffMode, DiffResult, DiffStats, TieBreak
from .document import DocumentNode, DocumentTree

__all__ = [
    # Document models
    "DocumentNode",
    "DocumentTree",
    # Diff models
    "DiffEntry",
    "DiffKind",
    "DiffMode",
    "DiffResult",
    "DiffStats",
    "TieBreak",
    # Comparison API models
    "CompareRequest",
    "ExtractRequest",
    "ExtractResponse",
    "LinesCompareRequest",
    "StreamEvent",
]

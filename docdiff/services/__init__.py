"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_cache import DiffCache
from .document_differ import DocumentDiffer, diff_documents
from .lcs import build_lcs_table, compute_lcs
from .line_extractor import extract_lines, extract_text
from .reconciler import reconcile, reconcile_strict
from .stats import aggregate

__all__ = [
    "ConfigManager",
    "DiffCache",
    "DocumentDiffer",
    "diff_documents",
    "build_lcs_table",
    "compute_lcs",
    "extract_lines",
    "extract_text",
    "reconcile",
    "reconcile_strict",
    "aggregate",
]

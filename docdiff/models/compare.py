"""Comparison API data models"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from .diff import DiffEntry, DiffMode, DiffStats
from .document import DocumentNode


class CompareRequest(BaseModel):
    """Request to compare two document trees"""

    original: DocumentNode
    modified: DocumentNode
    mode: DiffMode | None = None  # Falls back to the configured mode


class LinesCompareRequest(BaseModel):
    """Request to compare two already extracted line sequences"""

    original: list[str]
    modified: list[str]
    mode: DiffMode | None = None

    @field_validator("original", "modified")
    @classmethod
    def _single_lines(cls, lines: list[str]) -> list[str]:
        for number, line in enumerate(lines, start=1):
            if "\n" in line or "\r" in line:
                raise ValueError(f"line {number} contains a line break")
        return lines


class ExtractRequest(BaseModel):
    """Request to flatten a document tree into lines"""

    document: DocumentNode


class ExtractResponse(BaseModel):
    """Lines extracted from a document tree"""

    lines: list[str]
    count: int


class StreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "entry", "stats", "done", "error"
    entry: DiffEntry | None = None
    stats: DiffStats | None = None
    done: bool = False
    error: str | None = None

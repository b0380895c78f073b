"""Diff-related data models"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class DiffKind(str, Enum):
    """Classification of a single diff row"""

    UNCHANGED = "Unchanged"
    ADDED = "Added"
    REMOVED = "Removed"
    MODIFIED = "Modified"


class DiffMode(str, Enum):
    """Reconciliation strategy used to turn two line sequences into entries"""

    PAIRED = "paired"  # default walk, pairs unanchored lines as Modified
    STRICT = "strict"  # textbook backtrack, only Added/Removed/Unchanged


class TieBreak(str, Enum):
    """Which sequence the LCS backtrack steps through when both moves are equal"""

    CONSUME_MODIFIED = "consume_modified"
    CONSUME_ORIGINAL = "consume_original"


# Kinds that carry a line from each side of the comparison
_HAS_ORIGINAL = {DiffKind.UNCHANGED, DiffKind.REMOVED, DiffKind.MODIFIED}
_HAS_MODIFIED = {DiffKind.UNCHANGED, DiffKind.ADDED, DiffKind.MODIFIED}


class WireModel(BaseModel):
    """Base for models serialized with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict: camelCase keys, absent fields omitted"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DiffEntry(WireModel):
    """One row of a document comparison"""

    kind: DiffKind
    original_text: str | None = None
    modified_text: str | None = None
    original_line_number: int | None = Field(default=None, ge=1)  # 1-indexed
    modified_line_number: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_sides(self) -> DiffEntry:
        has_original = self.kind in _HAS_ORIGINAL
        has_modified = self.kind in _HAS_MODIFIED

        if (self.original_text is not None) != has_original:
            raise ValueError(f"{self.kind.value} entry has wrong original text presence")
        if (self.modified_text is not None) != has_modified:
            raise ValueError(f"{self.kind.value} entry has wrong modified text presence")
        if (self.original_line_number is not None) != has_original:
            raise ValueError(f"{self.kind.value} entry has wrong original line number presence")
        if (self.modified_line_number is not None) != has_modified:
            raise ValueError(f"{self.kind.value} entry has wrong modified line number presence")
        return self


class DiffStats(WireModel):
    """Per-kind counts; Modified entries only count toward total"""

    added: int = 0
    removed: int = 0
    unchanged: int = 0
    total: int = 0


class DiffResult(WireModel):
    """Complete comparison of two documents"""

    entries: list[DiffEntry] = []
    stats: DiffStats = DiffStats()

    @property
    def has_changes(self) -> bool:
        return self.stats.unchanged != self.stats.total

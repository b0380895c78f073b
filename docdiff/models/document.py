"""Document tree data models"""

from __future__ import annotations

from typing import Protocol, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DocumentTree(Protocol):
    """Read-only view of a document node, independent of any editor library"""

    @property
    def kind(self) -> str | None: ...

    @property
    def text(self) -> str | None: ...

    @property
    def children(self) -> Sequence[DocumentTree]: ...


class DocumentNode(BaseModel):
    """JSON-compatible document node: { kind?, text?, content? }"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Editors such as TipTap/ProseMirror call this field "type"
    kind: str | None = Field(default=None, validation_alias=AliasChoices("kind", "type"))
    text: str | None = None
    content: list[DocumentNode] | None = None

    @property
    def children(self) -> list[DocumentNode]:
        """Child nodes in document order; a missing content list means a leaf"""
        return self.content or []


DocumentNode.model_rebuild()

"""
Line Extractor - Flatten a document tree into plain-text lines
"""

from __future__ import annotations

import re

from docdiff.models.document import DocumentTree

# Node kinds that become exactly one line of the comparison
LINE_KINDS = frozenset({"paragraph", "heading"})

# Lines never contain breaks; a break inside a paragraph reads as a space
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def extract_text(node: DocumentTree) -> str:
    """Concatenate the text carried by a node and its descendants, in order"""
    if node.text:
        return node.text
    return "".join(extract_text(child) for child in node.children)


def extract_lines(tree: DocumentTree) -> list[str]:
    """
    Walk the tree depth-first (pre-order) and return one line per
    non-empty paragraph or heading. Line breaks inside a paragraph become
    spaces.

    Containers of any other kind are not lines themselves, but their
    children are still visited. The tree must be acyclic.
    """
    lines: list[str] = []
    _collect(tree, lines)
    return lines


def _collect(node: DocumentTree, lines: list[str]) -> None:
    if node.kind in LINE_KINDS:
        text = _LINE_BREAK.sub(" ", extract_text(node))
        # Empty paragraphs vanish
        if text:
            lines.append(text)
        return

    for child in node.children:
        _collect(child, lines)

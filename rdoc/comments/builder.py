"""
Conversion of Rust comment tokens into a textlint document tree.

Pipeline: keep doc comments → group adjacent rows → one Paragraph per
group (Str child per comment) → Document over all paragraphs.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .grouping import group_consecutive
from .kinds import CommentKind, classify, extract_content
from ..textlint.nodes import (
    Location,
    Position,
    TxtDocumentNode,
    TxtParagraphNode,
    TxtStrNode,
)
from ..types import CommentToken


def build_str_node(token: CommentToken, kind: CommentKind) -> TxtStrNode:
    """
    Create a Str node for one doc comment.

    The start offset and column are shifted past the opening marker; the end
    is taken from the token as is (textlint lines are 1-based).
    """
    extracted = extract_content(token.text, kind)
    prefix_length = extracted.prefix_length

    return TxtStrNode(
        raw=extracted.content,
        value=extracted.content,
        range=(token.start_index + prefix_length, token.end_index),
        loc=Location(
            start=Position(
                line=token.start_point.row + 1,
                column=token.start_point.column + prefix_length,
            ),
            end=Position(
                line=token.end_point.row + 1,
                column=token.end_point.column,
            ),
        ),
    )


def build_paragraph(group: Sequence[CommentToken]) -> Optional[TxtParagraphNode]:
    """
    Create a Paragraph node from a group of adjacent comments.

    Ordinary comments in the group are skipped; returns None when no doc
    comment is left.
    """
    children: List[TxtStrNode] = []
    for token in group:
        kind = classify(token.text)
        if kind is None:
            continue
        children.append(build_str_node(token, kind))

    if not children:
        return None

    first_child, last_child = children[0], children[-1]
    return TxtParagraphNode(
        raw="\n".join(token.text for token in group),
        range=(first_child.range[0], last_child.range[1]),
        loc=Location(start=first_child.loc.start, end=last_child.loc.end),
        children=tuple(children),
    )


def convert(tokens: Sequence[CommentToken], raw_text: str) -> TxtDocumentNode:
    """
    Convert comment tokens of one source file into a textlint Document.

    Args:
        tokens: Comment tokens sorted and de-duplicated by start offset
        raw_text: Full source text

    Returns:
        Document node; without doc comments it is empty and spans the whole text
    """
    doc_tokens = [token for token in tokens if classify(token.text) is not None]

    paragraphs = []
    for group in group_consecutive(doc_tokens):
        paragraph = build_paragraph(group)
        if paragraph is not None:
            paragraphs.append(paragraph)

    if not paragraphs:
        origin = Position(line=1, column=0)
        return TxtDocumentNode(
            raw=raw_text,
            range=(0, len(raw_text)),
            loc=Location(start=origin, end=origin),
            children=(),
        )

    first_child, last_child = paragraphs[0], paragraphs[-1]
    return TxtDocumentNode(
        raw=raw_text,
        range=(first_child.range[0], last_child.range[1]),
        loc=Location(start=first_child.loc.start, end=last_child.loc.end),
        children=tuple(paragraphs),
    )


def convert_one(token: CommentToken) -> Optional[TxtStrNode]:
    """Convert a single comment without grouping (None for ordinary comments)."""
    kind = classify(token.text)
    if kind is None:
        return None
    return build_str_node(token, kind)


__all__ = ["build_str_node", "build_paragraph", "convert", "convert_one"]

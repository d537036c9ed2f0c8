"""
Rust doc comment classification and marker stripping.

Rust has four documentation comment forms:
- /// - outer line doc comment (documents following item)
- //! - inner line doc comment (documents enclosing item/module)
- /** ... */ - outer block doc comment (but /*** is a plain comment)
- /*! ... */ - inner block doc comment

Anything else is an ordinary comment and is not classified.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommentKind(str, Enum):
    OUTER_LINE = "outer_line"
    INNER_LINE = "inner_line"
    OUTER_BLOCK = "outer_block"
    INNER_BLOCK = "inner_block"

    @property
    def is_block(self) -> bool:
        return self in (CommentKind.OUTER_BLOCK, CommentKind.INNER_BLOCK)


@dataclass(frozen=True)
class ExtractedContent:
    content: str
    """Comment text without doc markers."""

    prefix_length: int
    """Characters consumed by the opening marker on the first line."""


_LINE_PREFIXES = {
    CommentKind.OUTER_LINE: re.compile(r"^///\s?"),
    CommentKind.INNER_LINE: re.compile(r"^//!\s?"),
}

_BLOCK_LINE_LEAD = re.compile(r"^\s*\*\s?")

# Width of `///`, `//!`, `/**` and `/*!`
_MARKER_LENGTH = 3


def classify(text: str) -> Optional[CommentKind]:
    """
    Determine the doc comment kind of a raw comment.

    Args:
        text: Raw comment text as it appears in the source

    Returns:
        CommentKind, or None for an ordinary comment
    """
    if text.startswith("///"):
        return CommentKind.OUTER_LINE
    if text.startswith("//!"):
        return CommentKind.INNER_LINE
    if text.startswith("/**") and not text.startswith("/***"):
        return CommentKind.OUTER_BLOCK
    if text.startswith("/*!"):
        return CommentKind.INNER_BLOCK
    return None


def extract_content(text: str, kind: CommentKind) -> ExtractedContent:
    """
    Strip doc markers from a comment.

    Line comments lose the marker and one optional whitespace character.
    Block comments lose the opening and closing markers and the leading
    ` * ` of every line; their prefix_length only covers the opening marker.
    """
    if kind.is_block:
        inner = text[_MARKER_LENGTH:-2]
        return ExtractedContent(
            content=_process_block_content(inner),
            prefix_length=_MARKER_LENGTH,
        )

    match = _LINE_PREFIXES[kind].match(text)
    prefix_length = match.end() if match else _MARKER_LENGTH
    return ExtractedContent(content=text[prefix_length:], prefix_length=prefix_length)


def _process_block_content(content: str) -> str:
    lines = [_BLOCK_LINE_LEAD.sub("", line, count=1) for line in content.split("\n")]
    return "\n".join(lines).strip()


__all__ = ["CommentKind", "ExtractedContent", "classify", "extract_content"]

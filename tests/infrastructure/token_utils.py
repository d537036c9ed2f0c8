"""
Hand-made comment tokens for tests that do not need tree-sitter.
"""

from __future__ import annotations

from typing import List

from rdoc.types import CommentToken, Point


def _point(source: str, offset: int) -> Point:
    row = source.count("\n", 0, offset)
    line_start = source.rfind("\n", 0, offset) + 1
    return Point(row, offset - line_start)


def token_at(source: str, text: str, occurrence: int = 0) -> CommentToken:
    """
    Token for the n-th occurrence of `text` in `source`.
    """
    start = -1
    for _ in range(occurrence + 1):
        start = source.index(text, start + 1)
    end = start + len(text)
    return CommentToken(
        text=text,
        start_index=start,
        end_index=end,
        start_point=_point(source, start),
        end_point=_point(source, end),
    )


def tokens_for(source: str, *texts: str) -> List[CommentToken]:
    """Tokens for several distinct comment texts, in the given order."""
    return [token_at(source, text) for text in texts]

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    """Position in source text: 0-based row and column."""
    row: int
    column: int


@dataclass(frozen=True)
class CommentToken:
    """
    One comment as seen by the tokenizer.

    Offsets index into the source string (characters, not bytes),
    end offsets are exclusive.
    """
    text: str
    start_index: int
    end_index: int
    start_point: Point
    end_point: Point


__all__ = ["Point", "CommentToken"]

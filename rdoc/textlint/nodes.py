"""
textlint-compatible AST nodes.

Only the three node types produced for Rust doc comments are modelled:
Document → Paragraph → Str. Nodes are immutable; `to_dict()` renders the
JSON shape textlint expects (`type`, `raw`, `range`, `loc`, `children`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


class ASTNodeTypes:
    """Node type tags used by textlint."""
    Document = "Document"
    Paragraph = "Paragraph"
    Str = "Str"


@dataclass(frozen=True)
class Position:
    line: int
    """1-based line number."""

    column: int
    """0-based column."""

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class Location:
    start: Position
    end: Position

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


TxtRange = Tuple[int, int]


@dataclass(frozen=True)
class TxtStrNode:
    raw: str
    value: str
    range: TxtRange
    loc: Location
    type: str = ASTNodeTypes.Str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "raw": self.raw,
            "value": self.value,
            "range": list(self.range),
            "loc": self.loc.to_dict(),
        }


@dataclass(frozen=True)
class TxtParagraphNode:
    raw: str
    range: TxtRange
    loc: Location
    children: Tuple[TxtStrNode, ...]
    type: str = ASTNodeTypes.Paragraph

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "raw": self.raw,
            "range": list(self.range),
            "loc": self.loc.to_dict(),
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class TxtDocumentNode:
    raw: str
    range: TxtRange
    loc: Location
    children: Tuple[TxtParagraphNode, ...]
    type: str = ASTNodeTypes.Document

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "raw": self.raw,
            "range": list(self.range),
            "loc": self.loc.to_dict(),
            "children": [child.to_dict() for child in self.children],
        }


__all__ = [
    "ASTNodeTypes",
    "Position",
    "Location",
    "TxtRange",
    "TxtStrNode",
    "TxtParagraphNode",
    "TxtDocumentNode",
]

from __future__ import annotations

# Public API:
#  • convert / convert_one: comment tokens → textlint AST
#  • tokenize: Rust source → comment tokens (tree-sitter)
#  • RustdocProcessor: textlint-style pre/post processor
from .comments import CommentKind, classify, convert, convert_one, extract_content
from .processor import RustdocProcessor
from .rust import tokenize
from .types import CommentToken, Point

__all__ = [
    "CommentKind",
    "CommentToken",
    "Point",
    "RustdocProcessor",
    "classify",
    "convert",
    "convert_one",
    "extract_content",
    "tokenize",
]

from __future__ import annotations

# Public API of comments package:
#  • classify / extract_content: doc comment detection and marker stripping
#  • convert / convert_one: comment tokens → textlint AST
from .builder import build_paragraph, build_str_node, convert, convert_one
from .grouping import group_consecutive
from .kinds import CommentKind, ExtractedContent, classify, extract_content

__all__ = [
    "CommentKind",
    "ExtractedContent",
    "classify",
    "extract_content",
    "group_consecutive",
    "build_str_node",
    "build_paragraph",
    "convert",
    "convert_one",
]

from __future__ import annotations

from .nodes import (
    ASTNodeTypes,
    Location,
    Position,
    TxtDocumentNode,
    TxtParagraphNode,
    TxtStrNode,
)
from .tester import AstValidationError, is_valid_ast, check_ast

__all__ = [
    "ASTNodeTypes",
    "Location",
    "Position",
    "TxtDocumentNode",
    "TxtParagraphNode",
    "TxtStrNode",
    "AstValidationError",
    "is_valid_ast",
    "check_ast",
]

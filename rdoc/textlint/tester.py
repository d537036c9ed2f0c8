"""
Structural checker for textlint ASTs.

Mirrors the checks of `@textlint/ast-tester`, plus the ordering rules our
converter guarantees (ranges and locations never run backwards).
"""

from __future__ import annotations

from typing import Any, Mapping

from .nodes import ASTNodeTypes

_PARENT_TYPES = {ASTNodeTypes.Document, ASTNodeTypes.Paragraph}
_KNOWN_TYPES = _PARENT_TYPES | {ASTNodeTypes.Str}


class AstValidationError(ValueError):
    """AST node violates the textlint node contract."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def _as_dict(node: Any) -> Mapping[str, Any]:
    to_dict = getattr(node, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return node


def _check_position(pos: Any, path: str) -> tuple[int, int]:
    if not isinstance(pos, Mapping):
        raise AstValidationError(path, "position must be an object")
    line = pos.get("line")
    column = pos.get("column")
    if not isinstance(line, int) or line < 1:
        raise AstValidationError(path, f"line must be an int >= 1, got {line!r}")
    if not isinstance(column, int) or column < 0:
        raise AstValidationError(path, f"column must be an int >= 0, got {column!r}")
    return line, column


def _check_node(node: Mapping[str, Any], path: str) -> None:
    node_type = node.get("type")
    if node_type not in _KNOWN_TYPES:
        raise AstValidationError(path, f"unknown node type {node_type!r}")

    if not isinstance(node.get("raw"), str):
        raise AstValidationError(path, "raw must be a string")

    rng = node.get("range")
    if not isinstance(rng, (list, tuple)) or len(rng) != 2 or not all(isinstance(x, int) for x in rng):
        raise AstValidationError(path, f"range must be a pair of ints, got {rng!r}")
    if rng[0] > rng[1]:
        raise AstValidationError(path, f"range runs backwards: {list(rng)}")

    loc = node.get("loc")
    if not isinstance(loc, Mapping):
        raise AstValidationError(path, "loc must be an object")
    start = _check_position(loc.get("start"), f"{path}.loc.start")
    end = _check_position(loc.get("end"), f"{path}.loc.end")
    if start > end:
        raise AstValidationError(path, f"loc runs backwards: {start} > {end}")

    if node_type == ASTNodeTypes.Str:
        if not isinstance(node.get("value"), str):
            raise AstValidationError(path, "Str node must have a string value")
        return

    children = node.get("children")
    if not isinstance(children, list):
        raise AstValidationError(path, "parent node must have a children list")
    for i, child in enumerate(children):
        child_path = f"{path}.children[{i}]"
        if not isinstance(child, Mapping):
            raise AstValidationError(child_path, "child must be an object")
        _check_node(child, child_path)
        if node_type == ASTNodeTypes.Paragraph and child.get("type") != ASTNodeTypes.Str:
            raise AstValidationError(child_path, "Paragraph may only contain Str nodes")
    if node_type == ASTNodeTypes.Paragraph and not children:
        raise AstValidationError(path, "Paragraph must not be empty")


def check_ast(node: Any) -> None:
    """
    Validate an AST (node object or its dict form).

    Raises:
        AstValidationError: on the first violation, with a dotted path to the node
    """
    _check_node(_as_dict(node), "$")


def is_valid_ast(node: Any) -> bool:
    try:
        check_ast(node)
    except AstValidationError:
        return False
    return True


__all__ = ["AstValidationError", "check_ast", "is_valid_ast"]

"""
Rust source document: tree-sitter parse and comment tokenization.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Set

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterDocument, Node
from ..types import CommentToken

_LOG = logging.getLogger("rdoc.rust")


class RustDocument(TreeSitterDocument):

    def __init__(self, text: str, ext: str = "rs"):
        super().__init__(text, ext)

    def get_language(self) -> Language:
        import tree_sitter_rust as tsrust
        return Language(tsrust.language())

    def get_query_definitions(self) -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES

    def comment_tokens(self) -> List[CommentToken]:
        """
        All comments of the document in source order.

        Captures are de-duplicated by start offset. Offsets and columns are
        in characters.
        """
        if self.has_error():
            _LOG.debug("syntax errors in %d place(s); comments are still extracted", len(self.get_errors()))

        seen: Set[int] = set()
        nodes: List[Node] = []
        for node, _ in self.query("comments"):
            if node.start_byte in seen:
                continue
            seen.add(node.start_byte)
            nodes.append(node)
        nodes.sort(key=lambda n: n.start_byte)

        return [self._to_token(node) for node in nodes]

    def _to_token(self, node: Node) -> CommentToken:
        text = self.get_node_text(node)
        start_index, end_index = self.get_node_range(node)

        # The grammar may fold the terminating newline into a line comment
        trimmed = text.rstrip("\r\n")
        if trimmed != text and not trimmed.startswith("/*"):
            end_index -= len(text) - len(trimmed)
            text = trimmed

        return CommentToken(
            text=text,
            start_index=start_index,
            end_index=end_index,
            start_point=self.char_point(start_index),
            end_point=self.char_point(end_index),
        )


def tokenize(text: str) -> List[CommentToken]:
    """Parse Rust source and return its comment tokens."""
    return RustDocument(text).comment_tokens()


__all__ = ["RustDocument", "tokenize"]

"""
Tree-sitter infrastructure for source tokenizers.
Provides grammar loading, query management, and offset utilities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_right
from typing import Dict, List, Optional, Tuple

from tree_sitter import Tree, Node, Parser, Query, Language, QueryCursor

from .types import Point


class TreeSitterDocument(ABC):
    """
    Wrapper for Tree-sitter parsed document with query system.
    """

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode('utf-8')
        self._query_cache: Dict[str, Query] = {}
        self._line_starts = self._compute_line_starts(text)
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for queries.

        Returns:
            Language instance
        """
        pass

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """
        Get named query definitions for this language.

        Returns:
            Dict mapping query names to query strings
        """
        pass

    def get_parser(self) -> Parser:
        """
        Get parser for the language.

        A new parser per document keeps documents independent of each other.
        """
        return Parser(self.get_language())

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = self.get_parser()
        self.tree = parser.parse(self._text_bytes)

    @staticmethod
    def _compute_line_starts(text: str) -> List[int]:
        starts = [0]
        pos = text.find("\n")
        while pos != -1:
            starts.append(pos + 1)
            pos = text.find("\n", pos + 1)
        return starts

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def has_query(self, query_name: str) -> bool:
        """
        Check if a named query is supported by this language.
        """
        return query_name in self.get_query_definitions()

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of (node, capture_name) tuples

        Raises:
            ValueError: If query is not defined for this language
            RuntimeError: If document is not parsed
        """
        root_node = self.root_node

        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])

        results = []
        for _pattern_index, captures in cursor.matches(root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        return results

    def query_opt(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Safely execute a named query on the document.
        Returns empty list if query is not supported by this language.
        """
        if not self.has_query(query_name):
            return []

        return self.query(query_name)

    def find_nodes_by_type(self, node_type: str, start_node: Optional[Node] = None) -> List[Node]:
        """
        Find all nodes of a specific type.

        Args:
            node_type: Type of nodes to find
            start_node: Node to start search from (default: root)

        Returns:
            List of matching nodes
        """
        if start_node is None:
            start_node = self.root_node

        results = []

        def visit(node: Node):
            if node.type == node_type:
                results.append(node)
            for child in node.children:
                visit(child)

        visit(start_node)
        return results

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode('utf-8')

    def get_node_range(self, node: Node) -> Tuple[int, int]:
        """Get char range for a node."""
        return self.byte_to_char_position(node.start_byte), self.byte_to_char_position(node.end_byte)

    def char_point(self, char_offset: int) -> Point:
        """Row and character column (both 0-based) of a char offset."""
        row = bisect_right(self._line_starts, char_offset) - 1
        return Point(row, char_offset - self._line_starts[row])

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """Get all error nodes in the tree."""
        return self.find_nodes_by_type("ERROR")

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Correctly convert byte position to character position in Unicode text.
        Guarantees that if position points to the middle of a multi-byte character,
        returns position before that character.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)

        # UTF-8 guarantees maximum 4 bytes per character
        start = max(0, byte_pos - 4)
        for end in range(byte_pos, start - 1, -1):
            try:
                return len(self._text_bytes[:end].decode('utf-8'))
            except UnicodeDecodeError:
                continue
        return 0


__all__ = ["TreeSitterDocument", "Node"]

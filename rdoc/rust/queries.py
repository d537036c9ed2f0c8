"""
Tree-sitter query definitions for Rust language.
"""

from __future__ import annotations

QUERIES = {
    # All comments; doc comments are told apart later by their markers
    "comments": """
    (line_comment) @comment

    (block_comment) @comment
    """,
}

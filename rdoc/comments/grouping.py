"""
Grouping of consecutive comment tokens into paragraphs.
"""

from __future__ import annotations

from typing import List, Sequence

from ..types import CommentToken


def group_consecutive(tokens: Sequence[CommentToken]) -> List[List[CommentToken]]:
    """
    Split row-sorted tokens into maximal runs of adjacent rows.

    A token continues the current run when it starts on the row right after
    the previous token's start row. Start rows are compared (not end rows),
    so a multi-line block comment never absorbs the comment that follows it.

    Args:
        tokens: Comment tokens sorted by position

    Returns:
        Non-empty groups in source order (empty list for empty input)
    """
    if not tokens:
        return []

    groups: List[List[CommentToken]] = []
    current_group = [tokens[0]]

    for prev, token in zip(tokens, tokens[1:]):
        if token.start_point.row == prev.start_point.row + 1:
            current_group.append(token)
        else:
            groups.append(current_group)
            current_group = [token]

    groups.append(current_group)
    return groups


__all__ = ["group_consecutive"]

"""
Shared test infrastructure.
"""

from .token_utils import token_at, tokens_for

__all__ = ["token_at", "tokens_for"]

from __future__ import annotations

from .document import RustDocument, tokenize

__all__ = ["RustDocument", "tokenize"]

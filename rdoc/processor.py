"""
textlint-style processor for Rust sources.

pre_process turns Rust source into a textlint Document built from its doc
comments; post_process hands lint messages back unchanged together with the
file path they belong to.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .comments import convert
from .errors import UnsupportedExtensionError
from .rust import tokenize
from .textlint.nodes import TxtDocumentNode

_LOG = logging.getLogger("rdoc.processor")

DEFAULT_FILE_PATH = "<rust>"

LintMessage = Dict[str, Any]


@dataclass(frozen=True)
class PostProcessResult:
    messages: List[LintMessage]
    file_path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"messages": list(self.messages), "filePath": self.file_path}


@dataclass(frozen=True)
class ProcessorHandlers:
    pre_process: Callable[..., TxtDocumentNode]
    post_process: Callable[..., PostProcessResult]


@dataclass
class RustdocProcessor:
    """Processor plugin for `.rs` files."""

    options: Dict[str, Any] = field(default_factory=dict)

    BASE_EXTENSIONS = (".rs",)

    def available_extensions(self) -> List[str]:
        extra = [ext for ext in (self.options.get("extensions") or []) if ext not in self.BASE_EXTENSIONS]
        return [*self.BASE_EXTENSIONS, *extra]

    def processor(self, ext: str) -> ProcessorHandlers:
        """
        Handlers for the given extension.

        Raises:
            UnsupportedExtensionError: extension is not one of available_extensions()
        """
        supported = self.available_extensions()
        if ext not in supported:
            raise UnsupportedExtensionError(ext, supported)
        return ProcessorHandlers(pre_process=self.pre_process, post_process=self.post_process)

    def pre_process(self, text: str, file_path: Optional[str] = None) -> TxtDocumentNode:
        tokens = tokenize(text)
        document = convert(tokens, text)
        _LOG.debug(
            "%s: %d comment(s), %d paragraph(s)",
            file_path or DEFAULT_FILE_PATH, len(tokens), len(document.children),
        )
        return document

    def post_process(self, messages: List[LintMessage], file_path: Optional[str] = None) -> PostProcessResult:
        return PostProcessResult(messages=messages, file_path=file_path if file_path is not None else DEFAULT_FILE_PATH)


__all__ = ["RustdocProcessor", "ProcessorHandlers", "PostProcessResult", "DEFAULT_FILE_PATH"]

"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from RDocUserError.

Programming errors and bugs should NOT inherit from RDocUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations


class RDocUserError(Exception):
    """
    Base class for all user-facing errors.

    These errors indicate problems that the user can fix:
    configuration issues, unsupported files, unreadable input, etc.
    """
    pass


class ConfigLoadError(RDocUserError):
    """Invalid rdoc.yaml contents (schema or field types)."""
    pass


class UnsupportedExtensionError(RDocUserError):
    """Processor was asked to handle an extension it does not know."""

    def __init__(self, ext: str, supported: list[str]):
        self.ext = ext
        self.supported = supported
        super().__init__(
            f"Unsupported extension '{ext}' (supported: {', '.join(supported)})"
        )


__all__ = ["RDocUserError", "ConfigLoadError", "UnsupportedExtensionError"]

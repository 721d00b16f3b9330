"""Exceptions for jsinterop operations."""

from __future__ import annotations


class JsInteropError(Exception):
    """Base exception for jsinterop operations."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class SourceReadError(JsInteropError):
    """Raised when a JavaScript source file cannot be read."""

    pass


class OutputWriteError(JsInteropError):
    """Raised when a generated wrapper cannot be written to disk."""

    pass

"""Exception classes for RenderMark.

The parser itself never raises; these cover configuration and rendering.
"""

from __future__ import annotations


class RenderMarkError(Exception):
    """Base exception for all RenderMark errors."""


class ConfigError(RenderMarkError, ValueError):
    """Invalid or unreadable configuration file."""

    def __init__(self, message: str, source_file: str | None = None) -> None:
        self.message = message
        self.source_file = source_file
        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")


class RenderError(RenderMarkError):
    """A renderer was handed a node it does not know how to emit."""

    def __init__(self, node: object, renderer: str) -> None:
        self.node = node
        self.renderer = renderer
        super().__init__(f"{renderer} renderer cannot handle node {type(node).__name__}")

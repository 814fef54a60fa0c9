# src/inspector/errors.py
"""Error types raised by the inspector core."""
from typing import Any


class InspectorError(Exception):
    """Base error for the inspector."""


class InvalidRoleError(InspectorError, ValueError):
    """Raised when a role is outside the supported tag vocabulary."""

    def __init__(self, role: Any):
        self.role = role
        super().__init__(f"Invalid tag name {role!r}")


class MalformedTreeError(InspectorError, ValueError):
    """Raised when a hierarchy node is neither a mapping nor a sequence."""

    def __init__(self, node: Any, path: str = "$"):
        self.path = path
        self.node_type = type(node).__name__
        super().__init__(
            f"Malformed hierarchy node at {path}: expected mapping or sequence, got {self.node_type}"
        )


class UnsupportedBackendError(InspectorError, ValueError):
    """Raised when no hierarchy schema is registered for a backend."""

    def __init__(self, backend: Any):
        self.backend = backend
        super().__init__(f"Unsupported backend {backend!r}")


class SnapshotDecodeError(InspectorError):
    """Raised when page source text is neither JSON nor XML."""

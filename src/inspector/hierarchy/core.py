# src/inspector/hierarchy/core.py
from typing import Any, Mapping, Optional

from ..model import Backend, ElementDescriptor


def attribute(node: Mapping[str, Any], key: str) -> Optional[str]:
    """Returns the attribute as a string if it is present and non-empty."""
    value = node.get(key)
    if value is None:
        return None
    value = value if isinstance(value, str) else str(value)
    return value or None


class NodeSchema:
    """
    Strategy describing how one backend lays out its hierarchy snapshot.

    Subclasses declare which key points at a node's children, which key of the
    page source holds the tree, and how a single node maps onto an
    ElementDescriptor.
    """
    backend: Backend
    child_key: str
    root_key: str

    def extract(self, node: Mapping[str, Any]) -> Optional[ElementDescriptor]:
        """
        Builds a descriptor for one node, or None if the node carries no
        identifying attribute.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(backend={self.backend.value!r})"

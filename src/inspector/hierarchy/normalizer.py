# src/inspector/hierarchy/normalizer.py
import logging
from collections.abc import Mapping, Sequence
from typing import Any, List, Union

from .core import NodeSchema
from .registry import detect
from ..errors import MalformedTreeError
from ..model import Backend, ElementDescriptor

logger = logging.getLogger(__name__)


class HierarchyNormalizer:
    """
    Flattens a hierarchy snapshot into ElementDescriptors.

    The walk is depth-first and emits parents before their children, so the
    result follows document order. Input trees are never modified.
    """

    def __init__(self, schema: NodeSchema):
        self.schema = schema

    @classmethod
    def for_backend(cls, backend: Union[Backend, str]) -> "HierarchyNormalizer":
        """Builds a normalizer for the schema registered under a backend."""
        return cls(detect(backend))

    def normalize(self, node: Any) -> List[ElementDescriptor]:
        """
        Walks a snapshot tree and returns its descriptors in preorder.

        Args:
            node: A mapping, or a sequence of mappings, as decoded from the
                backend's page source.

        Raises:
            MalformedTreeError: If a node is neither a mapping nor a sequence.
        """
        descriptors = self._walk(node, "$")
        logger.debug(
            "Normalized %d descriptors using %s schema", len(descriptors), self.schema.backend.value
        )
        return descriptors

    def _walk(self, node: Any, path: str) -> List[ElementDescriptor]:
        if isinstance(node, Mapping):
            return self._walk_mapping(node, path)
        if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
            found: List[ElementDescriptor] = []
            for index, child in enumerate(node):
                found.extend(self._walk(child, f"{path}[{index}]"))
            return found
        raise MalformedTreeError(node, path)

    def _walk_mapping(self, node: Mapping[str, Any], path: str) -> List[ElementDescriptor]:
        found: List[ElementDescriptor] = []
        if not node:
            return found

        descriptor = self.schema.extract(node)
        if descriptor is not None:
            found.append(descriptor)

        child_key = self.schema.child_key
        if child_key in node:
            # The child pointer holds either one node or a list of nodes
            found.extend(self._walk(node[child_key], f"{path}.{child_key}"))
        return found

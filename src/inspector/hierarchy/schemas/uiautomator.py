# src/inspector/hierarchy/schemas/uiautomator.py
from typing import Any, Dict, Mapping, Optional

from ..core import NodeSchema, attribute
from ...model import Backend, ElementDescriptor


class UiAutomatorSchema(NodeSchema):
    """
    uiautomator's XML dump, decoded with '@'-prefixed attributes and the
    child elements under 'node'. The dump has no visibility flag.
    """
    backend = Backend.UIAUTOMATOR
    child_key = "node"
    root_key = "hierarchy"

    def extract(self, node: Mapping[str, Any]) -> Optional[ElementDescriptor]:
        fields: Dict[str, Any] = {}
        desc = attribute(node, "@content-desc")
        if desc is not None:
            fields["name"] = desc
        text = attribute(node, "@text")
        if text is not None:
            fields["text"] = text

        if not fields:
            return None

        return ElementDescriptor(
            **fields,
            class_name=attribute(node, "@class"),
            source=self.backend,
        )


SCHEMA = UiAutomatorSchema()

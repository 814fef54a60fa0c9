# src/inspector/hierarchy/schemas/selendroid.py
from typing import Any, Dict, Mapping, Optional

from ..core import NodeSchema, attribute
from ...model import Backend, ElementDescriptor


class SelendroidSchema(NodeSchema):
    """
    Selendroid's JSON page source.

    Selendroid reuses the accessibility naming: 'name' is the resource id,
    'value' the text and 'label' the accessible name.
    """
    backend = Backend.SELENDROID
    child_key = "children"
    root_key = "children"

    FIELD_KEYS = (("id", "name"), ("text", "value"), ("name", "label"))

    def extract(self, node: Mapping[str, Any]) -> Optional[ElementDescriptor]:
        fields: Dict[str, Any] = {}
        for field, key in self.FIELD_KEYS:
            value = attribute(node, key)
            if value is not None:
                fields[field] = value

        # A bare 'type' says nothing about which element this is
        if not fields:
            return None

        return ElementDescriptor(
            **fields,
            class_name=attribute(node, "type"),
            visible=node.get("shown", False),
            source=self.backend,
        )


SCHEMA = SelendroidSchema()

# src/inspector/snapshot.py
"""
Decoding of page sources into the tree shape the hierarchy schemas walk.

Selendroid returns JSON. uiautomator returns an XML dump, which is decoded
into mappings with '@'-prefixed attributes and child elements grouped by tag
name (a single child stays a mapping, several become a list).
"""
import json
import logging
import warnings
from collections.abc import Mapping
from typing import Any, Dict, Union

from bs4 import BeautifulSoup, Tag, XMLParsedAsHTMLWarning

from .errors import MalformedTreeError, SnapshotDecodeError
from .hierarchy.core import NodeSchema

logger = logging.getLogger(__name__)

Source = Union[str, bytes, Mapping]


def decode_source(source: Source) -> Mapping:
    """
    Decodes a page source into a RawNode mapping.

    Args:
        source: An already decoded mapping, JSON text, or uiautomator XML text.

    Raises:
        SnapshotDecodeError: If the text is neither JSON nor XML.
    """
    if isinstance(source, Mapping):
        return source

    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotDecodeError(f"Page source is not valid UTF-8: {e}") from e

    text = source.replace('\ufeff', '').strip()
    if text.startswith("<"):
        return xml_to_tree(text)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotDecodeError(f"Page source is neither JSON nor XML: {e}") from e

    if not isinstance(data, Mapping):
        raise SnapshotDecodeError(f"Page source must decode to an object, got {type(data).__name__}")
    return data


def xml_to_tree(xml: str) -> Dict[str, Any]:
    """Converts an XML dump into nested mappings keyed by tag name."""
    with warnings.catch_warnings():
        # The dump only uses lowercase names, so html.parser reads it faithfully
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        soup = BeautifulSoup(xml, 'html.parser')
    roots = [child for child in soup.children if isinstance(child, Tag)]
    if not roots:
        raise SnapshotDecodeError("XML page source has no root element")

    tree: Dict[str, Any] = {}
    for root in roots:
        _add_child(tree, root.name, _element_to_node(root))
    logger.debug("Decoded XML page source with root(s): %s", ", ".join(tree))
    return tree


def _element_to_node(tag: Tag) -> Dict[str, Any]:
    node: Dict[str, Any] = {f"@{key}": _attr_value(value) for key, value in tag.attrs.items()}
    for child in tag.children:
        if isinstance(child, Tag):
            _add_child(node, child.name, _element_to_node(child))
    return node


def _attr_value(value: Any) -> str:
    # html.parser splits a few multi-valued attributes (e.g. 'class') into lists
    if isinstance(value, list):
        return " ".join(value)
    return value


def _add_child(parent: Dict[str, Any], name: str, node: Dict[str, Any]) -> None:
    existing = parent.get(name)
    if existing is None:
        parent[name] = node
    elif isinstance(existing, list):
        existing.append(node)
    else:
        parent[name] = [existing, node]


def root_node(source: Mapping, schema: NodeSchema) -> Any:
    """
    Returns the part of a decoded page source that holds the element tree.

    Raises:
        MalformedTreeError: If the source is not a mapping or lacks the
            schema's root key.
    """
    if not isinstance(source, Mapping):
        raise MalformedTreeError(source)
    if schema.root_key not in source:
        raise MalformedTreeError(None, f"$.{schema.root_key}")
    return source[schema.root_key]

# src/inspector/inspection.py
import logging
from typing import List, Union

from .hierarchy.normalizer import HierarchyNormalizer
from .hierarchy.registry import detect
from .model import Backend, ElementDescriptor
from .report.reporter import InspectionReporter
from .snapshot import Source, decode_source, root_node

logger = logging.getLogger(__name__)


def get_elements(source: Source, backend: Union[Backend, str]) -> List[ElementDescriptor]:
    """Decodes a page source and flattens its tree with the backend's schema."""
    schema = detect(backend)
    logger.debug("Inspecting page source with %r", schema)
    tree = root_node(decode_source(source), schema)
    return HierarchyNormalizer(schema).normalize(tree)


def get_inspect(source: Source, backend: Union[Backend, str]) -> str:
    """
    Returns a string describing the interesting elements of a page source.

    Args:
        source: The page source (decoded mapping, JSON or XML text).
        backend: The backend that produced it.
    """
    return InspectionReporter().render(get_elements(source, backend))


def page(source: Source, backend: Union[Backend, str]) -> None:
    """Prints the inspection of a page source."""
    report = get_inspect(source, backend)
    # Like puts: no second newline after a report that already ends in one
    print(report, end="" if report.endswith("\n") else "\n")

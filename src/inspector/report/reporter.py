# src/inspector/report/reporter.py
import logging
import re
from typing import Iterable, List, Optional

from ..model import Backend, ElementDescriptor

logger = logging.getLogger(__name__)

ID_PREFIX = re.compile(r"^id/")
# Selendroid reports a missing label as the string 'null'.
NULL_LABEL = "null"


class InspectionReporter:
    """
    Renders normalized descriptors as a plain-text listing, one block per
    element, in traversal order.
    """

    def render(self, descriptors: Iterable[ElementDescriptor]) -> str:
        """
        Formats every reportable descriptor.

        Invisible elements and elements identified only by an id are skipped.

        Returns:
            str: The concatenated blocks; empty if nothing is reportable.
        """
        blocks: List[str] = []
        skipped = 0
        for descriptor in descriptors:
            if not self.is_reportable(descriptor):
                skipped += 1
                continue
            blocks.append(self.render_element(descriptor))

        logger.debug("Rendered %d elements, skipped %d", len(blocks), skipped)
        return "".join(blocks)

    def is_reportable(self, descriptor: ElementDescriptor) -> bool:
        """True if the element is visible and has a text or a name."""
        if not descriptor.visible:
            return False
        return descriptor.text is not None or self._name_of(descriptor) is not None

    def render_element(self, descriptor: ElementDescriptor) -> str:
        """Formats a single element block."""
        lines: List[str] = []
        if descriptor.class_name:
            lines.append(descriptor.short_class)
            lines.append(f"  class: {descriptor.class_name}")

        if descriptor.id is not None:
            lines.append(f"  id: {ID_PREFIX.sub('', descriptor.id)}")

        text = descriptor.text
        name = self._name_of(descriptor)
        if text is not None and text == name:
            lines.append(f"  text, name: {text}")
        else:
            if text is not None:
                lines.append(f"  text: {text}")
            if name is not None:
                lines.append(f"  name: {name}")

        return "".join(f"{line}\n" for line in lines)

    @staticmethod
    def _name_of(descriptor: ElementDescriptor) -> Optional[str]:
        if descriptor.source is Backend.SELENDROID and descriptor.name == NULL_LABEL:
            return None
        return descriptor.name

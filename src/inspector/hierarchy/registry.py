# src/inspector/hierarchy/registry.py
import importlib
import logging
import pkgutil
from typing import Dict, List, Union

from .core import NodeSchema
from ..errors import UnsupportedBackendError
from ..model import Backend

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """
    Central registry of hierarchy schemas, one per backend.

    Schemas are discovered from the 'inspector.hierarchy.schemas' package:
    every module exposing a module-level SCHEMA (a NodeSchema instance) is
    registered under its backend.
    """

    _schemas: Dict[Backend, NodeSchema] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """Registers every schema module found in 'inspector.hierarchy.schemas'."""
        if cls._loaded:
            return

        import inspector.hierarchy.schemas as schemas_pkg

        for _, name, _ in pkgutil.iter_modules(schemas_pkg.__path__):
            full_name = f"{schemas_pkg.__name__}.{name}"
            try:
                module = importlib.import_module(full_name)
            except ImportError as e:
                logger.error(f"Error loading schema module {name}: {e}")
                continue

            schema = getattr(module, "SCHEMA", None)
            if isinstance(schema, NodeSchema):
                cls._schemas[schema.backend] = schema
                logger.debug(f"Schema loaded: {schema.backend.value} ({full_name})")

        cls._loaded = True

    @classmethod
    def get_schema(cls, backend: Union[Backend, str]) -> NodeSchema:
        """
        Returns the schema registered for a backend.

        Raises:
            UnsupportedBackendError: If the value is not a known backend, or no
                schema module registered it.
        """
        cls.discover()
        try:
            key = Backend(backend)
        except ValueError:
            raise UnsupportedBackendError(backend) from None

        schema = cls._schemas.get(key)
        if schema is None:
            raise UnsupportedBackendError(backend)
        return schema

    @classmethod
    def backends(cls) -> List[Backend]:
        """Returns the backends that have a registered schema."""
        cls.discover()
        return sorted(cls._schemas, key=lambda b: b.value)


def detect(backend: Union[Backend, str]) -> NodeSchema:
    """Selects the normalizer schema for the backend that produced a snapshot."""
    return SchemaRegistry.get_schema(backend)

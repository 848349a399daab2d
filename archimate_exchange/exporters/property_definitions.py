"""Model-wide registry of property definitions.

Every distinct property key in the model gets one reference id
(``propid-1``, ``propid-2``, ...). Property nodes refer to their definition by
that id, and the <propertyDefinitions> section lists the registry in key order.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from archimate_exchange.exporters.constants import PROPERTY_ID_PREFIX
from archimate_exchange.models.archimate import ArchimateModel

logger = logging.getLogger(__name__)


class PropertyDefinitionRegistry:
    """Assigns reference ids to property keys.

    Ids are handed out in first-seen order; iteration is sorted by key, so the
    emitted definition list does not depend on traversal order.

    Attributes:
        _key_to_id: Mapping from property key to its reference id
        _counter: Last integer used for an id
    """

    def __init__(self, prefix: str = PROPERTY_ID_PREFIX):
        """Initialize empty registry.

        Args:
            prefix: Prefix for generated reference ids
        """
        self._prefix = prefix
        self._key_to_id: Dict[str, str] = {}
        self._counter = 0

    @classmethod
    def from_model(cls, model: ArchimateModel) -> "PropertyDefinitionRegistry":
        """Scan the whole model once and register every property key.

        Model-level properties come first, then every folder and object in
        ArchimateModel.iter_all_contents() order.

        Args:
            model: Model to scan

        Returns:
            Populated registry
        """
        registry = cls()
        for prop in model.properties:
            registry.register(prop.key)
        for obj in model.iter_all_contents():
            for prop in getattr(obj, "properties", None) or []:
                registry.register(prop.key)
        logger.debug(f"Registered {len(registry)} property definitions for model '{model.id}'")
        return registry

    def register(self, key: Optional[str]) -> Optional[str]:
        """Register a key and return its reference id.

        Args:
            key: Property key; None is ignored

        Returns:
            Existing id if the key was seen before, a new id otherwise,
            None for a None key
        """
        if key is None:
            return None
        existing = self._key_to_id.get(key)
        if existing is not None:
            return existing
        self._counter += 1
        ref_id = f"{self._prefix}{self._counter}"
        self._key_to_id[key] = ref_id
        return ref_id

    def get(self, key: Optional[str]) -> Optional[str]:
        """Get the reference id for a key without registering it."""
        if key is None:
            return None
        return self._key_to_id.get(key)

    def items(self) -> List[Tuple[str, str]]:
        """Return (key, reference id) pairs sorted by key."""
        return sorted(self._key_to_id.items())

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.items())

    def __contains__(self, key: object) -> bool:
        return key in self._key_to_id

    def __len__(self) -> int:
        return len(self._key_to_id)

    def __bool__(self) -> bool:
        return bool(self._key_to_id)

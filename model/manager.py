"""
Model manager: entity identity and collection mutation.

The reconciler never compares or mutates collections itself. It goes through
a ModelManager, which owns the notion of "same entity" (same persisted row
for ORM-backed models) and knows how to add to, remove from, and clear the
concrete container type.

InMemoryModelManager is the reference implementation over plain lists and
sets, keyed by an identifier attribute.
"""

import logging
from collections.abc import Mapping, MutableSet
from typing import Any, Protocol, runtime_checkable

from validation.errors import ModelTransformError

logger = logging.getLogger('AdminAdapters.model.manager')


@runtime_checkable
class ModelManager(Protocol):
    """Identity and mutation capability over entity collections."""

    def collection_has_element(self, collection, element) -> bool: ...

    def collection_add_element(self, collection, element) -> None: ...

    def collection_remove_element(self, collection, element) -> None: ...

    def collection_clear(self, collection) -> None: ...

    def model_reverse_transform(self, class_name: type, data: dict) -> Any: ...


_MISSING = object()


class InMemoryModelManager:
    """
    Model manager for in-memory lists and sets.

    Two entities are the same entity when their identifier values are equal.
    The identifier is read as an attribute, or as a key for mappings.
    Entities that carry no identifier (typically new, unsaved objects) are
    only ever equal to themselves.

    Args:
        identifier: Attribute or mapping key holding the entity identity (default: 'id')
    """

    def __init__(self, identifier: str = 'id'):
        self.identifier = identifier

    @classmethod
    def from_config(cls, config) -> "InMemoryModelManager":  # type: ignore[no-untyped-def]
        """Build a manager keyed by config.model_identifier."""
        return cls(identifier=config.model_identifier)

    def identity_of(self, entity: Any) -> Any:
        """Return the identifier value of entity, or a sentinel if it has none."""
        if isinstance(entity, Mapping):
            value = entity.get(self.identifier, _MISSING)
        else:
            value = getattr(entity, self.identifier, _MISSING)
        return _MISSING if value is None else value

    def is_same(self, left: Any, right: Any) -> bool:
        """Check whether two values represent the same entity."""
        if left is right:
            return True
        left_id = self.identity_of(left)
        if left_id is _MISSING:
            return False
        right_id = self.identity_of(right)
        if right_id is _MISSING:
            return False
        return left_id == right_id

    def _find(self, collection, element) -> Any:
        # The exact object wins over another element sharing its identity
        for candidate in collection:
            if candidate is element:
                return candidate
        for candidate in collection:
            if self.is_same(candidate, element):
                return candidate
        return _MISSING

    def collection_has_element(self, collection, element) -> bool:
        return self._find(collection, element) is not _MISSING

    def collection_add_element(self, collection, element) -> None:
        if isinstance(collection, MutableSet):
            collection.add(element)
        else:
            collection.append(element)

    def collection_remove_element(self, collection, element) -> None:
        """Remove element itself, else the first identity-equal element; no-op when absent."""
        found = self._find(collection, element)
        if found is _MISSING:
            return
        if isinstance(collection, MutableSet):
            collection.discard(found)
            return
        # list.remove() compares with ==, which may not match identity
        for index, candidate in enumerate(collection):
            if candidate is found:
                del collection[index]
                return

    def collection_clear(self, collection) -> None:
        collection.clear()

    def model_reverse_transform(self, class_name: type, data: dict) -> Any:
        """
        Build a class_name instance from submitted array data.

        Each key is assigned as an attribute. Keys that are neither an
        existing attribute of the fresh instance nor an annotated field
        of the class are rejected.

        Raises:
            ModelTransformError: If data contains an unknown field
        """
        instance = class_name()
        fields = {}
        for klass in reversed(class_name.__mro__):
            fields.update(getattr(klass, '__annotations__', {}))

        for key, value in data.items():
            if not hasattr(instance, key) and key not in fields:
                raise ModelTransformError(class_name.__name__, key)
            setattr(instance, key, value)

        logger.debug(f"Reverse transformed {len(data)} fields into {class_name.__name__}")
        return instance

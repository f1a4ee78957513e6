"""Central registry for field types that can be displayed as a grid."""

import logging

from .fields import FieldTypeDescriptor

logger = logging.getLogger(__name__)


class FieldTypeRegistry:
    """Store field type descriptors by name.

    The registry stands in for a field type plugin manager: each descriptor
    declares up front whether the type offers preconfigured options, so
    eligibility checks never have to inspect implementation classes.
    """

    def __init__(self):
        self._types = {}

    def register(self, descriptor):
        """Register ``descriptor`` under its name.

        Raises ``ValueError`` if the name is already present in the registry
        or ``TypeError`` if ``descriptor`` is not a ``FieldTypeDescriptor``.
        """

        if not isinstance(descriptor, FieldTypeDescriptor):
            raise TypeError("descriptor must be a FieldTypeDescriptor")
        if descriptor.name in self._types:
            raise ValueError(f"Field type '{descriptor.name}' is already registered")
        self._types[descriptor.name] = descriptor
        logger.debug(
            "Registered field type %s with %d preconfigured option(s)",
            descriptor.name,
            len(descriptor.preconfigured_options),
        )

    def unregister(self, name):
        self._types.pop(name, None)

    def get(self, name):
        """Return the descriptor registered under ``name`` if any."""

        return self._types.get(name)

    def describe(self, name):
        """Return the registered descriptor, or a bare one for unknown types."""

        return self._types.get(name) or FieldTypeDescriptor(name=name, label=name)

    def all(self):
        """Return a copy of the internal mapping of names to descriptors."""

        return dict(self._types)

    def clear(self):
        self._types.clear()


# Global registry instance used throughout the project.
field_type_registry = FieldTypeRegistry()


__all__ = ["FieldTypeRegistry", "field_type_registry"]

"""Field descriptors consumed by the grid formatter."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from django.apps import apps as django_apps
from django.core.exceptions import FieldDoesNotExist

CARDINALITY_UNLIMITED = -1

# Django internal field types -> registered field type names. Relations are
# always "entity_reference"; anything else unlisted keeps its lower-cased
# internal type.
MODEL_FIELD_TYPES = {
    "CharField": "string",
    "SlugField": "string",
    "TextField": "text",
    "IntegerField": "integer",
    "BigIntegerField": "integer",
    "SmallIntegerField": "integer",
    "PositiveIntegerField": "integer",
    "PositiveBigIntegerField": "integer",
    "PositiveSmallIntegerField": "integer",
    "DecimalField": "decimal",
    "FloatField": "float",
    "EmailField": "email",
    "URLField": "link",
    "FileField": "file",
    "FilePathField": "file",
    "ImageField": "image",
}
REFERENCE_TYPE = "entity_reference"


def model_field_type(model_field) -> str:
    """Return the registered field type name for a Django model field."""
    if model_field.is_relation:
        return REFERENCE_TYPE
    internal_type = model_field.get_internal_type()
    return MODEL_FIELD_TYPES.get(internal_type, internal_type.lower())


@dataclass(frozen=True)
class FieldTypeDescriptor:
    """A field type and the preconfigured display variants it offers.

    ``preconfigured_options`` maps option keys to labels. Types without
    variants leave it empty.
    """

    name: str
    label: str = ""
    preconfigured_options: dict[str, str] = field(default_factory=dict)

    @property
    def supports_preconfigured_options(self) -> bool:
        return bool(self.preconfigured_options)

    def option_keys(self) -> list[str]:
        """Return the composite ``field_ui:<type>:<option>`` keys."""
        return [preconfigured_key(self.name, key) for key in self.preconfigured_options]


def preconfigured_key(field_type: str, option: str) -> str:
    return f"field_ui:{field_type}:{option}"


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    type: str
    cardinality: int = 1
    entity_type: str = ""
    bundle: str = ""
    label: str = ""
    preconfigured_options: tuple[str, ...] = ()

    def is_multiple(self) -> bool:
        return self.cardinality != 1

    @classmethod
    def from_model_field(cls, model, field_name: str, registry=None) -> "FieldDefinition":
        """Describe ``model.field_name`` as a field definition.

        Relations become ``entity_reference`` fields. Many-to-many and reverse
        one-to-many relations are unlimited, every other field holds a single
        value. Preconfigured options come from the descriptor registered for
        the field type, if any.
        """
        if registry is None:
            from .registry import field_type_registry as registry

        model_field = model._meta.get_field(field_name)
        field_type = model_field_type(model_field)
        multiple = bool(model_field.many_to_many or model_field.one_to_many)
        descriptor = registry.get(field_type)
        options = tuple(descriptor.preconfigured_options) if descriptor else ()
        return cls(
            name=model_field.name,
            type=field_type,
            cardinality=CARDINALITY_UNLIMITED if multiple else 1,
            entity_type=model._meta.app_label,
            bundle=model._meta.model_name,
            label=str(getattr(model_field, "verbose_name", "") or model_field.name),
            preconfigured_options=options,
        )


@dataclass
class ContentEntity:
    """The entity being rendered: its type, bundle and field definitions."""

    entity_type: str
    bundle: str
    field_definitions: dict[str, FieldDefinition] = field(default_factory=dict)

    def get_field_definition(self, name: str) -> Optional[FieldDefinition]:
        return self.field_definitions.get(name)

    @classmethod
    def from_model(cls, model, registry=None) -> "ContentEntity":
        """Describe the concrete and many-to-many fields of a Django model."""
        definitions = {
            model_field.name: FieldDefinition.from_model_field(model, model_field.name, registry=registry)
            for model_field in list(model._meta.fields) + list(model._meta.many_to_many)
        }
        return cls(
            entity_type=model._meta.app_label,
            bundle=model._meta.model_name,
            field_definitions=definitions,
        )


def resolve_field_definition(entity_type: str, bundle: str, field_name: str, registry=None):
    """Return the definition of ``<entity_type>.<bundle>.<field_name>``.

    The entity type is an app label and the bundle a model name. Unknown
    models or fields resolve to ``None``.
    """
    try:
        model = django_apps.get_model(entity_type, bundle)
        return FieldDefinition.from_model_field(model, field_name, registry=registry)
    except (LookupError, ValueError, FieldDoesNotExist):
        return None


__all__ = [
    "CARDINALITY_UNLIMITED",
    "ContentEntity",
    "FieldDefinition",
    "FieldTypeDescriptor",
    "MODEL_FIELD_TYPES",
    "REFERENCE_TYPE",
    "model_field_type",
    "preconfigured_key",
    "resolve_field_definition",
]

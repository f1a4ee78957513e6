"""Field types registered when the app is ready."""
from django.apps import apps as django_apps

from .fields import REFERENCE_TYPE, FieldTypeDescriptor

SIMPLE_TYPES = (
    ("string", "Text (plain)"),
    ("text", "Text (formatted)"),
    ("integer", "Number (integer)"),
    ("decimal", "Number (decimal)"),
    ("float", "Number (float)"),
    ("email", "Email"),
    ("link", "Link"),
    ("file", "File"),
    ("image", "Image"),
)


def entity_reference_options():
    """One preconfigured option per installed model, keyed by model label."""
    return {
        model._meta.label_lower: str(model._meta.verbose_name).capitalize()
        for model in django_apps.get_models()
    }


def register(registry):
    for name, label in SIMPLE_TYPES:
        if registry.get(name) is None:
            registry.register(FieldTypeDescriptor(name=name, label=label))
    if registry.get(REFERENCE_TYPE) is None:
        registry.register(
            FieldTypeDescriptor(
                name=REFERENCE_TYPE,
                label="Reference",
                preconfigured_options=entity_reference_options(),
            )
        )

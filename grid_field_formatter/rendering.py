"""Theme layer: hook registry, preprocessors, suggestions and rendering.

A render element is a ``dict`` whose ``#``-prefixed keys are properties and
whose integer keys are the rendered items, in order. The ``#theme`` property
names the theme hook that turns it into markup.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from django.template.loader import select_template

from .conf import PROVIDER, get_config
from .validators import MAX_COLUMNS, MIN_COLUMNS, coerce_columns, to_number

logger = logging.getLogger(__name__)

GRID_UNITS = 12
GRID_LIBRARY = f"{PROVIDER}/grid"

# Library name -> static assets.
LIBRARIES = {
    GRID_LIBRARY: {"css": [f"{PROVIDER}/css/grid.css"]},
}


def element_children(element) -> list[int]:
    return sorted(key for key in element if isinstance(key, int))


def element_property(element, name, default=None):
    """Read ``#name`` from a render element, falling back to ``name``."""
    if f"#{name}" in element:
        return element[f"#{name}"]
    return element.get(name, default)


def css_name(value: str) -> str:
    return str(value).replace("_", "-").lower()


def attach_library(target, library: str) -> None:
    libraries = target.setdefault("#attached", {}).setdefault("library", [])
    if library not in libraries:
        libraries.append(library)


def preprocess_field(variables, hook, config=None):
    """Build the standard context shared by every field template."""
    element = variables["element"]
    field_name = element_property(element, "field_name", "")
    field_type = element_property(element, "field_type", "")
    items = [
        {"content": element[key], "attributes": {"class": ["field__item"]}}
        for key in element_children(element)
    ]

    variables["field_name"] = field_name
    variables["field_type"] = field_type
    variables["entity_type"] = element_property(element, "entity_type", "")
    variables["bundle"] = element_property(element, "bundle", "")
    variables["label"] = element_property(element, "title", "")
    variables["label_display"] = element_property(element, "label_display", "above")
    variables["label_hidden"] = variables["label_display"] == "hidden"
    variables["items"] = items
    variables["multiple"] = bool(element_property(element, "is_multiple", len(items) > 1))

    attributes = variables.setdefault("attributes", {})
    classes = attributes.setdefault("class", [])
    classes.extend(
        [
            "field",
            f"field--name-{css_name(field_name)}",
            f"field--type-{css_name(field_type)}",
            f"field--label-{variables['label_display']}",
        ]
    )


def column_count(value) -> int:
    """Return a usable column count, degrading to one column."""
    if isinstance(value, int) and not isinstance(value, bool) and MIN_COLUMNS <= value <= MAX_COLUMNS:
        return value
    number = to_number(value)
    if number is None or not (0 < number < MAX_COLUMNS + 1):
        logger.warning("Invalid grid column count %r, falling back to %d", value, MIN_COLUMNS)
        return MIN_COLUMNS
    return coerce_columns(number)


def preprocess_grid_field_formatter(variables, hook, config=None):
    """Prepare a grid field for its template.

    ``column_layout`` is the number of grid units each item spans in a
    twelve unit row. Column counts that do not divide twelve leave the row
    partly empty.
    """
    preprocess_field(variables, hook)
    config = get_config(config)
    element = variables["element"]

    columns = column_count(element.get("#columns"))
    variables["columns"] = columns
    variables["column_layout"] = GRID_UNITS // columns
    variables["container_attributes"] = {
        "class": ["row", css_name(PROVIDER), f"{css_name(PROVIDER)}--columns-{columns}"],
    }
    for item in variables["items"]:
        item["attributes"].setdefault("class", []).append(f"col-{variables['column_layout']}")

    # Bootstrap already ships the row/col classes.
    if not config.bootstrap:
        attach_library(variables, GRID_LIBRARY)


def theme_suggestions_grid_field_formatter(variables) -> list[str]:
    """Return template suggestions from the most general to the most specific."""
    element = variables.get("element", variables)
    field_type = element_property(element, "field_type", "")
    field_name = element_property(element, "field_name", "")
    entity_type = element_property(element, "entity_type", "")
    bundle = element_property(element, "bundle", "")
    return [
        f"{PROVIDER}__{field_type}",
        f"{PROVIDER}__{field_name}",
        f"{PROVIDER}__{entity_type}__{bundle}",
        f"{PROVIDER}__{entity_type}__{field_name}",
        f"{PROVIDER}__{entity_type}__{field_name}__{bundle}",
    ]


def theme():
    """Theme hooks declared by this app."""
    return {
        PROVIDER: {
            "render_element": "element",
            "template": f"{PROVIDER}/grid-field-formatter.html",
        },
    }


@dataclass
class ThemeHook:
    name: str
    template: str
    render_element: str = "element"
    preprocessors: list[Callable] = field(default_factory=list)
    suggestions: Optional[Callable] = None


class ThemeRegistry:
    def __init__(self):
        self._hooks = {}

    def register(self, hook: ThemeHook):
        if hook.name in self._hooks:
            raise ValueError(f"Theme hook '{hook.name}' is already registered")
        self._hooks[hook.name] = hook

    def register_declarations(self, declarations, preprocessors=None, suggestions=None):
        """Register hooks declared as ``{name: {"template": ..., ...}}``."""
        preprocessors = preprocessors or {}
        suggestions = suggestions or {}
        for name, info in declarations.items():
            self.register(
                ThemeHook(
                    name=name,
                    template=info["template"],
                    render_element=info.get("render_element", "element"),
                    preprocessors=list(preprocessors.get(name, [])),
                    suggestions=suggestions.get(name),
                )
            )

    def get(self, name):
        return self._hooks.get(name)

    def all(self):
        return dict(self._hooks)


def template_name(suggestion: str) -> str:
    return f"{PROVIDER}/{css_name(suggestion)}.html"


def render(element, config=None, registry=None) -> str:
    """Render ``element`` through its theme hook.

    The most specific existing suggestion template wins. Libraries attached
    while preprocessing are copied onto ``element`` so the page can emit
    them.
    """
    registry = registry or theme_registry
    hook = registry.get(element.get("#theme") or "field")
    if hook is None:
        raise LookupError(f"Unknown theme hook '{element.get('#theme')}'")

    variables = {hook.render_element: element}
    for preprocess in hook.preprocessors:
        preprocess(variables, hook.name, config=config)

    names = []
    if hook.suggestions is not None:
        names = [template_name(s) for s in reversed(hook.suggestions(variables))]
    names.append(hook.template)

    for library in variables.get("#attached", {}).get("library", []):
        attach_library(element, library)
    variables["attached"] = variables.pop("#attached", {})
    return select_template(names).render(variables)


def attached_libraries(*elements) -> list[str]:
    """Collect attached libraries from render elements and their children."""
    libraries = []

    def collect(element):
        for library in element.get("#attached", {}).get("library", []):
            if library not in libraries:
                libraries.append(library)
        for key, child in element.items():
            if isinstance(child, dict) and not (isinstance(key, str) and key.startswith("#")):
                collect(child)

    for element in elements:
        if isinstance(element, dict):
            collect(element)
    return libraries


theme_registry = ThemeRegistry()
theme_registry.register(ThemeHook(name="field", template=f"{PROVIDER}/field.html", preprocessors=[preprocess_field]))
theme_registry.register_declarations(
    theme(),
    preprocessors={PROVIDER: [preprocess_grid_field_formatter]},
    suggestions={PROVIDER: theme_suggestions_grid_field_formatter},
)


__all__ = [
    "GRID_LIBRARY",
    "GRID_UNITS",
    "LIBRARIES",
    "ThemeHook",
    "ThemeRegistry",
    "attached_libraries",
    "column_count",
    "element_children",
    "preprocess_field",
    "preprocess_grid_field_formatter",
    "render",
    "theme",
    "theme_registry",
    "theme_suggestions_grid_field_formatter",
]

from django import template
from django.forms.utils import flatatt
from django.templatetags.static import static
from django.utils.html import format_html_join

from grid_field_formatter.display import entity_view_alter, field_elements
from grid_field_formatter.fields import ContentEntity
from grid_field_formatter.rendering import LIBRARIES, attached_libraries, render

register = template.Library()


@register.filter
def attributes(value):
    """Render an attribute mapping; list values are joined with spaces."""
    if not value:
        return ""
    flat = {}
    for name, attr in value.items():
        if isinstance(attr, (list, tuple)):
            attr = " ".join(str(part) for part in attr if part)
        flat[name] = attr
    return flatatt(flat)


@register.simple_tag
def render_field_element(element):
    return render(element)


@register.simple_tag
def render_entity(build, entity, view_mode="default"):
    """Render the field elements of ``build`` with grid mode applied.

    ``entity`` is a ``ContentEntity`` or a model instance.
    """
    if not isinstance(entity, ContentEntity):
        entity = ContentEntity.from_model(entity._meta.model)
    entity_view_alter(build, {"entity": entity, "view_mode": view_mode})
    return format_html_join("\n", "{}", ((render(element),) for _, element in field_elements(build)))


@register.simple_tag
def attached_css(*elements):
    """Emit ``<link>`` tags for the stylesheets attached to ``elements``."""
    hrefs = []
    for library in attached_libraries(*elements):
        for path in LIBRARIES.get(library, {}).get("css", []):
            hrefs.append((static(path),))
    return format_html_join("\n", '<link rel="stylesheet" href="{}">', hrefs)

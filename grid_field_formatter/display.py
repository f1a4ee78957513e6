"""Switch eligible field render elements to the grid theme hook."""
from __future__ import annotations

import logging

from .conf import PROVIDER, get_config
from .eligibility import is_grid_eligible
from .models import DEFAULT_VIEW_MODE, FieldDisplayComponent
from .validators import MIN_COLUMNS

logger = logging.getLogger(__name__)

GRID_THEME = PROVIDER


def grid_settings(component) -> dict:
    """Return the stored grid settings of ``component`` with defaults."""
    if component is None:
        return {"grid_enable": False, "columns": MIN_COLUMNS}
    return {
        "grid_enable": bool(component.get_third_party_setting(PROVIDER, "grid_enable", False)),
        "columns": component.get_third_party_setting(PROVIDER, "columns") or MIN_COLUMNS,
    }


def field_elements(build):
    """Yield ``(field_name, element)`` for the field children of ``build``."""
    for key, element in build.items():
        if isinstance(key, str) and key.startswith("#"):
            continue
        if isinstance(element, dict):
            yield key, element


def entity_view_alter(build, context, config=None, displays=None):
    """Apply grid mode to the fields of one rendered entity, in place.

    ``context`` holds the ``entity`` and ``view_mode``. ``displays`` resolves
    the effective display components of a view mode and defaults to the
    stored ``FieldDisplayComponent`` rows.
    """
    entity = context.get("entity")
    if entity is None:
        return
    view_mode = context.get("view_mode") or DEFAULT_VIEW_MODE
    config = get_config(config)
    if displays is None:
        displays = FieldDisplayComponent.objects

    components = None
    for field_name, element in field_elements(build):
        field_definition = entity.get_field_definition(field_name)
        if field_definition is None or not is_grid_eligible(field_definition, config):
            continue
        if components is None:
            components = displays.collect_render_display(entity.entity_type, entity.bundle, view_mode)
        settings = grid_settings(components.get(field_name))
        if not settings["grid_enable"]:
            continue
        element["#theme"] = GRID_THEME
        element["#columns"] = settings["columns"]
        logger.debug(
            "Rendering %s.%s.%s as a %s column grid",
            entity.entity_type,
            field_name,
            view_mode,
            settings["columns"],
        )


__all__ = ["GRID_THEME", "entity_view_alter", "field_elements", "grid_settings"]

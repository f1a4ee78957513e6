from __future__ import annotations

from .conf import GridConfig, get_config
from .fields import FieldDefinition, preconfigured_key


def is_grid_eligible(field_definition: FieldDefinition, config: GridConfig | None = None) -> bool:
    """Return whether ``field_definition`` may be displayed as a grid.

    Single-value fields never qualify. A multi-value field qualifies when its
    type is enabled, or when one of its preconfigured options is enabled
    under ``field_ui:<type>:<option>``.
    """
    if field_definition.cardinality == 1:
        return False

    config = get_config(config)
    field_type = field_definition.type
    if config.is_enabled(field_type):
        return True

    return any(
        config.is_enabled(preconfigured_key(field_type, option))
        for option in field_definition.preconfigured_options
    )


def enabled_field_types(config: GridConfig | None = None) -> list[str]:
    config = get_config(config)
    return sorted(key for key, enabled in config.field_types.items() if enabled)


__all__ = ["is_grid_eligible", "enabled_field_types"]

"""Runtime access to grid field formatter configuration defaults."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from django.conf import settings as django_settings

__all__ = ["settings", "GridFieldFormatterSettings", "GridConfig", "get_config", "PROVIDER"]

# Namespace used for third-party settings, libraries and theme hooks.
PROVIDER = "grid_field_formatter"


@dataclass
class GridFieldFormatterSettings:
    """Proxy object exposing Django settings with sensible fallbacks."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:  # pragma: no cover - simple delegation
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)


settings = GridFieldFormatterSettings(
    defaults={
        "GRID_FIELD_FORMATTER_FIELD_TYPES": {},
        "GRID_FIELD_FORMATTER_BOOTSTRAP": False,
        "GRID_FIELD_FORMATTER_FIELD_TYPE_PROVIDERS": [],
    }
)


@dataclass(frozen=True)
class GridConfig:
    """Snapshot of the module-wide settings.

    ``field_types`` maps a field type name, or a composite
    ``field_ui:<type>:<option>`` key, to whether grid mode is offered for it.
    ``bootstrap`` tells the theme layer that a Bootstrap grid is already on
    the page, so the bundled stylesheet is not needed.
    """

    field_types: Mapping[str, bool] = field(default_factory=dict)
    bootstrap: bool = False

    @classmethod
    def from_settings(cls) -> "GridConfig":
        return cls(
            field_types=dict(settings.GRID_FIELD_FORMATTER_FIELD_TYPES or {}),
            bootstrap=bool(settings.GRID_FIELD_FORMATTER_BOOTSTRAP),
        )

    def is_enabled(self, key: str) -> bool:
        return bool(self.field_types.get(key))


def get_config(config: GridConfig | None = None) -> GridConfig:
    """Return ``config`` or a fresh snapshot of the Django settings."""
    return config if config is not None else GridConfig.from_settings()

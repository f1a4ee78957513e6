"""Grid layout display mode for multi-value fields."""

from .apps import GridFieldFormatterConfig
from .conf import settings

__all__ = ["settings", "GridFieldFormatterConfig"]

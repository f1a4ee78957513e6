from importlib import import_module

from django.apps import AppConfig

from .conf import settings
from .registry import field_type_registry


class GridFieldFormatterConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "grid_field_formatter"
    verbose_name = "Grid field formatter"

    def ready(self):
        from .builtins import register as register_builtins

        register_builtins(field_type_registry)

        providers = getattr(settings, "GRID_FIELD_FORMATTER_FIELD_TYPE_PROVIDERS", [])
        for entry in providers:
            try:
                module_path, callable_name = entry.split(":", 1)
            except ValueError:
                import_module(entry)
            else:
                module = import_module(module_path)
                registrar = getattr(module, callable_name)
                registrar(field_type_registry)

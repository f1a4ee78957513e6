from django.contrib import admin

from .fields import resolve_field_definition
from .forms import FieldDisplayComponentForm
from .models import FieldDisplayComponent
from .summary import settings_summary_alter


@admin.register(FieldDisplayComponent)
class FieldDisplayComponentAdmin(admin.ModelAdmin):
    form = FieldDisplayComponentForm
    list_display = ("entity_type", "bundle", "view_mode", "field_name", "formatter", "grid_summary")
    search_fields = ("entity_type", "bundle", "field_name", "formatter")
    list_filter = ("entity_type", "view_mode")
    readonly_fields = ("third_party_settings",)

    @admin.display(description="Grid")
    def grid_summary(self, obj):
        field_definition = resolve_field_definition(obj.entity_type, obj.bundle, obj.field_name)
        if field_definition is None:
            return "-"
        summary = []
        settings_summary_alter(summary, {"field_definition": field_definition, "formatter": obj})
        return ", ".join(str(line) for line in summary) or "-"

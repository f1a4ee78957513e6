from django import forms
from django.utils.translation import gettext_lazy as _
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Layout, Div, Field

from .conf import PROVIDER
from .eligibility import is_grid_eligible
from .fields import resolve_field_definition
from .models import FieldDisplayComponent
from .validators import COLUMNS_LABEL, MIN_COLUMNS, coerce_columns, columns_message, validate_columns


class GridSettingsFields(forms.Form):
    """The grid checkbox and column count shared by the settings forms."""

    grid_enable = forms.BooleanField(required=False, label=_("Display as grid"))
    columns = forms.CharField(
        label=COLUMNS_LABEL,
        help_text=_("Between 1 and 12 columns per row."),
        initial=MIN_COLUMNS,
        validators=[validate_columns],
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["columns"].error_messages["required"] = columns_message()

    def clean_columns(self):
        return coerce_columns(self.cleaned_data["columns"])

    def grid_initial(self, component):
        """Initial checkbox and column values read from ``component``."""
        return {
            "grid_enable": bool(component.get_third_party_setting(PROVIDER, "grid_enable", False)),
            "columns": component.get_third_party_setting(PROVIDER, "columns") or MIN_COLUMNS,
        }

    def store_grid_settings(self, component):
        component.set_third_party_setting(PROVIDER, "grid_enable", self.cleaned_data["grid_enable"])
        component.set_third_party_setting(PROVIDER, "columns", self.cleaned_data["columns"])


class GridSettingsForm(GridSettingsFields):
    """Per-field grid settings shown inside a display settings form."""

    class Media:
        js = ("grid_field_formatter/js/states.js",)

    def __init__(self, *args, field_definition=None, formatter=None, view_mode="default", **kwargs):
        self.field_definition = field_definition
        self.formatter = formatter
        self.view_mode = view_mode
        if formatter is not None:
            initial = kwargs.setdefault("initial", {})
            for key, value in self.grid_initial(formatter).items():
                initial.setdefault(key, value)
        super().__init__(*args, **kwargs)

        # Only shown while the checkbox is ticked.
        self.fields["columns"].widget.attrs.update(
            {
                "class": "form-control form-control-sm",
                "size": 2,
                "data-visible-when": self.add_prefix("grid_enable"),
            }
        )
        self.fields["grid_enable"].widget.attrs.update({"class": "form-check-input"})

        self.helper = FormHelper()
        self.helper.form_tag = False  # rendered inside the display settings form
        self.helper.disable_csrf = True
        self.helper.layout = Layout(
            Div(
                Field("grid_enable"),
                Field("columns"),
                css_class="grid-field-formatter-settings",
            )
        )

    def save(self, component, commit=True):
        """Store the cleaned values as third-party settings of ``component``."""
        self.store_grid_settings(component)
        if commit:
            component.save()
        return component


class FieldDisplayComponentForm(GridSettingsFields, forms.ModelForm):
    """Admin form editing a display component and its grid settings.

    Grid settings are edited through the validated fields, never as raw
    JSON. Other providers' third-party settings are left untouched.
    """

    class Meta:
        model = FieldDisplayComponent
        fields = ["entity_type", "bundle", "view_mode", "field_name", "formatter", "settings"]

    class Media:
        js = ("grid_field_formatter/js/states.js",)

    def __init__(self, *args, config=None, **kwargs):
        self.config = config
        super().__init__(*args, **kwargs)
        for key, value in self.grid_initial(self.instance).items():
            self.initial.setdefault(key, value)
        self.fields["columns"].widget.attrs.update({"data-visible-when": self.add_prefix("grid_enable")})

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get("grid_enable"):
            field_definition = resolve_field_definition(
                cleaned_data.get("entity_type", ""),
                cleaned_data.get("bundle", ""),
                cleaned_data.get("field_name", ""),
            )
            if field_definition is None or not is_grid_eligible(field_definition, self.config):
                self.add_error("grid_enable", _("Grid display is not available for this field."))
        return cleaned_data

    def save(self, commit=True):
        component = super().save(commit=False)
        self.store_grid_settings(component)
        if commit:
            component.save()
        return component


def settings_form_prefix(field_definition) -> str:
    return f"fields-{field_definition.name}-{PROVIDER}"


def third_party_settings_form(
    formatter,
    field_definition,
    view_mode,
    form=None,
    form_state=None,
    config=None,
):
    """Return the grid settings form for ``field_definition``.

    ``form`` is the display settings form being built and ``form_state`` the
    submitted data, if any. Fields that cannot use grid mode get no form.
    """
    if not is_grid_eligible(field_definition, config):
        return None
    return GridSettingsForm(
        form_state,
        field_definition=field_definition,
        formatter=formatter,
        view_mode=view_mode,
        prefix=settings_form_prefix(field_definition),
    )


__all__ = [
    "FieldDisplayComponentForm",
    "GridSettingsFields",
    "GridSettingsForm",
    "settings_form_prefix",
    "third_party_settings_form",
]

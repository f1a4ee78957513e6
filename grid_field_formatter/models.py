from django.db import models

DEFAULT_VIEW_MODE = "default"


class FieldDisplayComponentManager(models.Manager):
    def for_display(self, entity_type: str, bundle: str, view_mode: str):
        """Return components stored for exactly this view mode."""
        return self.filter(entity_type=entity_type, bundle=bundle, view_mode=view_mode)

    def collect_render_display(self, entity_type: str, bundle: str, view_mode: str):
        """Return the effective components keyed by field name.

        A view mode without its own components renders with the ``default``
        view mode's components.
        """
        components = list(self.for_display(entity_type, bundle, view_mode))
        if not components and view_mode != DEFAULT_VIEW_MODE:
            components = list(self.for_display(entity_type, bundle, DEFAULT_VIEW_MODE))
        return {component.field_name: component for component in components}

    def get_component(self, entity_type: str, bundle: str, view_mode: str, field_name: str):
        return self.collect_render_display(entity_type, bundle, view_mode).get(field_name)


class FieldDisplayComponent(models.Model):
    """How one field of a bundle is displayed in one view mode."""

    entity_type = models.CharField(max_length=100)
    bundle = models.CharField(max_length=100)
    view_mode = models.CharField(max_length=100, default=DEFAULT_VIEW_MODE)
    field_name = models.CharField(max_length=255)
    formatter = models.CharField(max_length=100, blank=True, default="")
    settings = models.JSONField(default=dict, blank=True)
    # Provider name -> {setting: value}
    third_party_settings = models.JSONField(default=dict, blank=True)

    objects = FieldDisplayComponentManager()

    class Meta:
        verbose_name = "Field display component"
        verbose_name_plural = "Field display components"
        constraints = [
            models.UniqueConstraint(
                fields=["entity_type", "bundle", "view_mode", "field_name"],
                name="unique_field_display_component",
            )
        ]

    def __str__(self):
        return f"{self.entity_type}.{self.bundle}.{self.view_mode} → {self.field_name}"

    def get_third_party_settings(self, provider: str) -> dict:
        return dict((self.third_party_settings or {}).get(provider) or {})

    def get_third_party_setting(self, provider: str, key: str, default=None):
        return self.get_third_party_settings(provider).get(key, default)

    def set_third_party_setting(self, provider: str, key: str, value) -> None:
        third_party = dict(self.third_party_settings or {})
        provider_settings = dict(third_party.get(provider) or {})
        provider_settings[key] = value
        third_party[provider] = provider_settings
        self.third_party_settings = third_party

    def unset_third_party_setting(self, provider: str, key: str) -> None:
        third_party = dict(self.third_party_settings or {})
        provider_settings = dict(third_party.get(provider) or {})
        provider_settings.pop(key, None)
        if provider_settings:
            third_party[provider] = provider_settings
        else:
            third_party.pop(provider, None)
        self.third_party_settings = third_party

from django.contrib.auth.models import User
from django.template import Context, Template
from django.test import SimpleTestCase, TestCase, override_settings

from grid_field_formatter.conf import GridConfig
from grid_field_formatter.display import entity_view_alter, grid_settings
from grid_field_formatter.fields import CARDINALITY_UNLIMITED, ContentEntity, FieldDefinition
from grid_field_formatter.models import FieldDisplayComponent

CONFIG = GridConfig(field_types={"image": True})


def article():
    return ContentEntity(
        entity_type="node",
        bundle="article",
        field_definitions={
            "field_images": FieldDefinition(
                name="field_images", type="image", cardinality=CARDINALITY_UNLIMITED,
                entity_type="node", bundle="article",
            ),
            "field_cover": FieldDefinition(
                name="field_cover", type="image", cardinality=1, entity_type="node", bundle="article",
            ),
        },
    )


def build():
    return {
        "#entity_type": "node",
        "field_images": {"#theme": "field", "#field_name": "field_images", 0: "a.png", 1: "b.png"},
        "field_cover": {"#theme": "field", "#field_name": "field_cover", 0: "c.png"},
        "links": {"#theme": "links"},
    }


def stored(field_name="field_images", view_mode="default", **grid):
    obj = FieldDisplayComponent(entity_type="node", bundle="article", view_mode=view_mode, field_name=field_name)
    for key, value in grid.items():
        obj.set_third_party_setting("grid_field_formatter", key, value)
    return obj


class FakeDisplays:
    def __init__(self, *components):
        self.components = {c.field_name: c for c in components}
        self.calls = []

    def collect_render_display(self, entity_type, bundle, view_mode):
        self.calls.append((entity_type, bundle, view_mode))
        return self.components


class EntityViewAlterTests(SimpleTestCase):
    def test_enabled_grid_switches_theme_and_columns(self):
        result = build()
        displays = FakeDisplays(stored(grid_enable=True, columns=4))
        entity_view_alter(result, {"entity": article(), "view_mode": "full"}, config=CONFIG, displays=displays)
        self.assertEqual(result["field_images"]["#theme"], "grid_field_formatter")
        self.assertEqual(result["field_images"]["#columns"], 4)
        self.assertEqual(displays.calls, [("node", "article", "full")])

    def test_disabled_or_missing_settings_leave_element_alone(self):
        for displays in (FakeDisplays(stored(grid_enable=False, columns=4)), FakeDisplays(stored()), FakeDisplays()):
            with self.subTest(displays=displays.components):
                result = build()
                expected = build()
                entity_view_alter(result, {"entity": article(), "view_mode": "full"}, config=CONFIG, displays=displays)
                self.assertEqual(result, expected)

    def test_ineligible_fields_are_skipped(self):
        result = build()
        displays = FakeDisplays(stored("field_cover", grid_enable=True, columns=2))
        entity_view_alter(result, {"entity": article(), "view_mode": "full"}, config=CONFIG, displays=displays)
        self.assertEqual(result["field_cover"]["#theme"], "field")
        self.assertNotIn("#columns", result["field_cover"])

    def test_columns_default_to_one(self):
        result = build()
        displays = FakeDisplays(stored(grid_enable=True))
        entity_view_alter(result, {"entity": article(), "view_mode": "full"}, config=CONFIG, displays=displays)
        self.assertEqual(result["field_images"]["#columns"], 1)

    def test_without_entity_nothing_happens(self):
        result = build()
        entity_view_alter(result, {}, config=CONFIG, displays=FakeDisplays())
        self.assertEqual(result, build())

    def test_grid_settings_defaults(self):
        self.assertEqual(grid_settings(None), {"grid_enable": False, "columns": 1})


class EntityViewAlterStoredDisplayTests(TestCase):
    def test_view_mode_falls_back_to_default_display(self):
        stored(grid_enable=True, columns=3).save()
        result = build()
        entity_view_alter(result, {"entity": article(), "view_mode": "teaser"}, config=CONFIG)
        self.assertEqual(result["field_images"]["#theme"], "grid_field_formatter")
        self.assertEqual(result["field_images"]["#columns"], 3)

    def test_view_mode_specific_display_wins(self):
        stored(grid_enable=True, columns=3).save()
        stored(view_mode="teaser", grid_enable=False).save()
        result = build()
        entity_view_alter(result, {"entity": article(), "view_mode": "teaser"}, config=CONFIG)
        self.assertEqual(result["field_images"]["#theme"], "field")

    def test_get_component(self):
        obj = stored(grid_enable=True, columns=2)
        obj.save()
        found = FieldDisplayComponent.objects.get_component("node", "article", "full", "field_images")
        self.assertEqual(found.pk, obj.pk)
        self.assertIsNone(FieldDisplayComponent.objects.get_component("node", "page", "full", "field_images"))


@override_settings(GRID_FIELD_FORMATTER_FIELD_TYPES={"entity_reference": True}, GRID_FIELD_FORMATTER_BOOTSTRAP=False)
class RenderEntityTagTests(TestCase):
    def test_model_instance_fields_render_as_grid(self):
        component = FieldDisplayComponent(entity_type="auth", bundle="user", field_name="groups")
        component.set_third_party_setting("grid_field_formatter", "grid_enable", True)
        component.set_third_party_setting("grid_field_formatter", "columns", 2)
        component.save()
        build = {
            "groups": {
                "#theme": "field",
                "#field_name": "groups",
                "#field_type": "entity_reference",
                "#entity_type": "auth",
                "#bundle": "user",
                0: "Editors",
                1: "Authors",
            },
            "username": {"#theme": "field", "#field_name": "username", "#field_type": "string", 0: "ada"},
        }
        template = Template("{% load grid_field_formatter_tags %}{% render_entity build user 'full' %}")
        html = template.render(Context({"build": build, "user": User(username="ada")}))

        self.assertEqual(build["groups"]["#theme"], "grid_field_formatter")
        self.assertEqual(build["username"]["#theme"], "field")
        self.assertIn('class="field__item col-6"', html)
        self.assertIn(">ada</div>", html)

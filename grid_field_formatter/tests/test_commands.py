from io import StringIO

from django.contrib import admin
from django.core.management import call_command
from django.test import SimpleTestCase, override_settings

from grid_field_formatter.models import FieldDisplayComponent


@override_settings(
    GRID_FIELD_FORMATTER_FIELD_TYPES={"image": True, "field_ui:gallery:photos": True},
    GRID_FIELD_FORMATTER_BOOTSTRAP=True,
)
class GridFieldFormatterStatusCommandTests(SimpleTestCase):
    def call(self, *args):
        out = StringIO()
        call_command("grid_field_formatter_status", *args, stdout=out, no_color=True)
        return out.getvalue().splitlines()

    def test_lists_types_and_options(self):
        lines = self.call()
        self.assertIn("image\tImage\tenabled", lines)
        self.assertIn("string\tText (plain)\tdisabled", lines)
        self.assertIn("field_ui:gallery:photos\tPhotos\tenabled", lines)
        self.assertIn("field_ui:gallery:videos\tVideos\tdisabled", lines)
        self.assertEqual(lines[-1], "bootstrap\tyes")

    def test_enabled_only(self):
        lines = self.call("--enabled-only")
        self.assertEqual(
            lines,
            ["field_ui:gallery:photos\tPhotos\tenabled", "image\tImage\tenabled", "bootstrap\tyes"],
        )


class AdminRegistrationTests(SimpleTestCase):
    def test_field_display_component_is_registered(self):
        self.assertTrue(admin.site.is_registered(FieldDisplayComponent))

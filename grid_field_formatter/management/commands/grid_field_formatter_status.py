from django.core.management.base import BaseCommand, CommandError

from grid_field_formatter.conf import GridConfig
from grid_field_formatter.fields import preconfigured_key
from grid_field_formatter.registry import field_type_registry


class Command(BaseCommand):
    help = "List registered field types and whether grid display is enabled for them."

    def add_arguments(self, parser):
        parser.add_argument(
            "--enabled-only",
            action="store_true",
            help="Only list field types and options that are enabled.",
        )

    def handle(self, *args, **options):
        enabled_only = options.get("enabled_only")
        try:
            config = GridConfig.from_settings()
            rows = []
            for name, descriptor in sorted(field_type_registry.all().items()):
                rows.append((name, descriptor.label, config.is_enabled(name)))
                for option, label in sorted(descriptor.preconfigured_options.items()):
                    key = preconfigured_key(name, option)
                    rows.append((key, label, config.is_enabled(key)))

            for key, label, enabled in rows:
                if enabled_only and not enabled:
                    continue
                marker = self.style.SUCCESS("enabled") if enabled else "disabled"
                self.stdout.write(f"{key}\t{label}\t{marker}")

            self.stdout.write(f"bootstrap\t{'yes' if config.bootstrap else 'no'}")
        except Exception as exc:
            raise CommandError(f"Error listing grid field types: {exc}")

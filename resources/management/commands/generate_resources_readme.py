from django.conf import settings
from django.core.management.base import BaseCommand

from resources import store
from resources.services.report_formatter import write_report


class Command(BaseCommand):
    help = "Regenerate the README from the current resources file."

    def handle(self, *args, **options):
        resources = store.load(settings.RESOURCES_FILE)
        write_report(settings.RESOURCES_README_FILE, resources)
        self.stdout.write(
            self.style.SUCCESS(f"README regenerated with {len(resources)} resources.")
        )

from django.core.management.base import BaseCommand

from apps.maintenance.services import seed_page_statuses


class Command(BaseCommand):
    help = "Create page status rows for manifest routes that do not have one yet"

    def handle(self, *args, **options):
        created = seed_page_statuses()
        self.stdout.write(self.style.SUCCESS(f"Seeded {created} page status row(s)"))

from django.core.management.base import BaseCommand

from api.directory.services import resume_pending_conversions


class Command(BaseCommand):
    help = "Yarım kalmış rehber → firma dönüşümlerini tamamlar."

    def handle(self, *args, **opts):
        finished = resume_pending_conversions()
        self.stdout.write(self.style.SUCCESS(f"{finished} dönüşüm tamamlandı."))

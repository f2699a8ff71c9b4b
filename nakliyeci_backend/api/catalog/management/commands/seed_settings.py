from django.core.management.base import BaseCommand, CommandError

from api.catalog.services import seed_settings


class Command(BaseCommand):
    help = "Varsayılan ayar kayıtlarını (araç tipleri, üyelikler, duyurular...) ekler"

    def handle(self, *args, **options):
        ok, details = seed_settings()
        for row in details:
            self.stdout.write(f"[{row['category']}] {row['name']}: {row['status']}")
        if not ok:
            raise CommandError("Bazı ayarlar yüklenirken hatalar oluştu.")
        added = sum(1 for row in details if row["status"] == "Başarıyla eklendi")
        self.stdout.write(self.style.SUCCESS(f"{added} kayıt eklendi."))

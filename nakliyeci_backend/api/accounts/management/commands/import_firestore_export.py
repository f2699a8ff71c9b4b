import json

from django.core.management.base import BaseCommand, CommandError

from api.accounts.importers import FirestoreImporter


class Command(BaseCommand):
    help = "Firestore JSON dışa aktarımını (firestore-export biçimi) içe aktarır"

    def add_arguments(self, parser):
        parser.add_argument("file", help="Dışa aktarım dosyası (.json)")

    def handle(self, *args, **options):
        try:
            with open(options["file"], encoding="utf-8") as fh:
                export = json.load(fh)
        except OSError as e:
            raise CommandError(f"Dosya okunamadı: {e}")
        except json.JSONDecodeError as e:
            raise CommandError(f"Geçersiz JSON: {e}")
        if not isinstance(export, dict):
            raise CommandError("Dışa aktarım bir JSON nesnesi olmalıdır.")

        stats = FirestoreImporter(export).run()
        for key in sorted(stats):
            self.stdout.write(f"{key}: {stats[key]}")
        failed = sum(v for k, v in stats.items() if k.endswith(".failed"))
        if failed:
            self.stdout.write(self.style.WARNING(f"{failed} kayıt yüklenemedi, loglara bakın."))
        else:
            self.stdout.write(self.style.SUCCESS("İçe aktarma tamamlandı."))

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from api.accounts.services import bootstrap_admin


class Command(BaseCommand):
    help = "İlk süper yönetici hesabını oluşturur (varsa dokunmaz)"

    def add_arguments(self, parser):
        parser.add_argument("--username", default=settings.ADMIN_BOOTSTRAP_USERNAME)
        parser.add_argument("--password", default=settings.ADMIN_BOOTSTRAP_PASSWORD)

    def handle(self, *args, **options):
        username = (options["username"] or "").strip()
        password = options["password"] or ""
        if not username or not password:
            raise CommandError(
                "Kullanıcı adı ve şifre gerekli (--username/--password veya "
                "ADMIN_BOOTSTRAP_USERNAME/ADMIN_BOOTSTRAP_PASSWORD)."
            )

        admin, created = bootstrap_admin(username, password)
        if created:
            self.stdout.write(self.style.SUCCESS(f"Süper yönetici oluşturuldu: {admin.username}"))
        else:
            self.stdout.write(f"Yönetici zaten mevcut, atlandı: {admin.username}")

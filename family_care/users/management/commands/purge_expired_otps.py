from __future__ import annotations

from django.core.management.base import BaseCommand

from family_care.users.services import purge_expired_otps


class Command(BaseCommand):
    help = "Delete one-time passwords whose expiry has passed"

    def handle(self, *args, **options) -> str | None:
        deleted = purge_expired_otps()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} expired OTP(s)."))
        return None

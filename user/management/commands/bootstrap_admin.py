from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from storefront.errors import Conflict
from user.services import AuthService
from user.tokens import TokenIssuer


class Command(BaseCommand):
    help = "Create the admin user from ADMIN_USER / ADMIN_PASSWORD if it does not exist yet."

    def add_arguments(self, parser):
        parser.add_argument("--username", help="Overrides the ADMIN_USER setting")
        parser.add_argument("--password", help="Overrides the ADMIN_PASSWORD setting")

    def handle(self, *args, **options):
        username = options.get("username") or settings.ADMIN_USER
        password = options.get("password") or settings.ADMIN_PASSWORD
        if not username or not password:
            raise CommandError("ADMIN_USER and ADMIN_PASSWORD must be configured")

        auth_service = AuthService(TokenIssuer(settings.JWT_SECRET, settings.JWT_TTL_SECONDS))
        try:
            user = auth_service.register_admin(username, password)
        except Conflict:
            self.stdout.write(f"Admin user {username} already exists, leaving it unchanged")
            return
        self.stdout.write(self.style.SUCCESS(f"Created admin user {user['username']} (id={user['id']})"))

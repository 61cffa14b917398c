from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from user.models import User

pytestmark = pytest.mark.django_db


def run(*args, **kwargs):
    out = StringIO()
    call_command("bootstrap_admin", *args, stdout=out, **kwargs)
    return out.getvalue()


class TestBootstrapAdmin:
    def test_creates_admin_from_settings(self):
        output = run()

        admin = User.objects.get(username="admin")
        assert admin.roles == ["user", "admin"]
        assert admin.check_password("apiadm")
        assert "Created admin user admin" in output

    def test_is_idempotent(self):
        run()
        output = run(password="something-else")

        assert User.objects.filter(username="admin").count() == 1
        assert User.objects.get(username="admin").check_password("apiadm")
        assert "already exists" in output

    def test_options_override_settings(self):
        run(username="ops", password="hunter2")

        assert User.objects.get(username="ops").has_role("admin")

    def test_requires_credentials(self, settings):
        settings.ADMIN_USER = ""

        with pytest.raises(CommandError):
            run()

    def test_bootstrapped_admin_can_log_in(self, api_client):
        run()

        response = api_client.post("/api/v1/auth/login", {"username": "admin", "password": "apiadm"}, format="json")

        assert response.status_code == 200
        assert "token" in response.json()

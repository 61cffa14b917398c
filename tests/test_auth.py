import pytest

from storefront.errors import Conflict, InvalidPassword, NotFound
from user.models import Role, User

from .conftest import PASSWORD

pytestmark = pytest.mark.django_db


class TestAuthService:
    def test_register_returns_public_projection(self, auth_service):
        projection = auth_service.register("alice", "secret")

        assert set(projection) == {"id", "username", "roles"}
        assert projection["username"] == "alice"
        assert projection["roles"] == ["user"]

    def test_password_is_stored_hashed(self, auth_service):
        auth_service.register("alice", "secret")

        stored = User.objects.get(username="alice")
        assert stored.password != "secret"
        assert stored.check_password("secret")

    def test_duplicate_username_conflicts(self, auth_service):
        auth_service.register("alice", "secret")

        with pytest.raises(Conflict, match="User already exists"):
            auth_service.register("alice", "other")

    def test_usernames_are_case_sensitive(self, auth_service):
        auth_service.register("alice", "secret")

        assert auth_service.register("Alice", "secret")["username"] == "Alice"

    def test_register_admin_sets_both_roles(self, auth_service):
        projection = auth_service.register_admin("boss", "secret")

        assert projection["roles"] == ["user", "admin"]
        assert User.objects.get(username="boss").is_staff

    def test_unknown_role_is_refused(self, auth_service):
        with pytest.raises(ValueError):
            auth_service.register("eve", "secret", roles=["root"])
        assert not User.objects.filter(username="eve").exists()

    def test_login_issues_verifiable_token(self, auth_service, token_issuer, user):
        token = auth_service.login("testuser", PASSWORD)

        credential = token_issuer.verify(token)
        assert credential.user_id == user.pk
        assert credential.username == "testuser"
        assert credential.roles == frozenset({Role.USER})

    def test_login_unknown_user(self, auth_service):
        with pytest.raises(NotFound, match="User not found"):
            auth_service.login("ghost", "whatever")

    def test_login_wrong_password(self, auth_service, user):
        with pytest.raises(InvalidPassword, match="Invalid password"):
            auth_service.login("testuser", "wrongpassword")


class TestRegisterEndpoint:
    url = "/api/v1/auth/register"

    def test_register_then_duplicate(self, api_client):
        first = api_client.post(self.url, {"username": "testuser", "password": PASSWORD}, format="json")

        assert first.status_code == 201
        body = first.json()
        assert "id" in body
        assert body["username"] == "testuser"
        assert body["roles"] == ["user"]
        assert "password" not in body

        second = api_client.post(self.url, {"username": "testuser", "password": PASSWORD}, format="json")

        assert second.status_code == 400
        assert second.json()["message"] == "User already exists"

    @pytest.mark.parametrize("payload", [
        {},
        {"username": "testuser"},
        {"password": PASSWORD},
        {"username": "", "password": PASSWORD},
    ])
    def test_missing_fields(self, api_client, payload):
        response = api_client.post(self.url, payload, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "The username and/or password parameter must be a string"


class TestLoginEndpoint:
    url = "/api/v1/auth/login"

    def test_correct_credentials(self, api_client, user, token_issuer):
        response = api_client.post(self.url, {"username": "testuser", "password": PASSWORD}, format="json")

        assert response.status_code == 200
        assert token_issuer.verify(response.json()["token"]).user_id == user.pk

    def test_wrong_password(self, api_client, user):
        response = api_client.post(self.url, {"username": "testuser", "password": "wrongpassword"}, format="json")

        assert response.status_code == 400
        assert response.json() == {"status": 400, "message": "Invalid password"}

    def test_unknown_user(self, api_client):
        response = api_client.post(self.url, {"username": "ghost", "password": PASSWORD}, format="json")

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"


class TestAdminRegisterEndpoint:
    url = "/api/v1/auth/adm/register"

    def test_admin_can_register_admin(self, api_client, admin_token):
        response = api_client.post(
            self.url,
            {"username": "second-admin", "password": PASSWORD},
            format="json",
            HTTP_X_ACCESS_TOKEN=admin_token,
        )

        assert response.status_code == 201
        assert response.json()["roles"] == ["user", "admin"]

    def test_plain_user_is_forbidden(self, api_client, user_token):
        response = api_client.post(
            self.url,
            {"username": "sneaky", "password": PASSWORD},
            format="json",
            HTTP_X_ACCESS_TOKEN=user_token,
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Require Admin Role!"
        assert not User.objects.filter(username="sneaky").exists()

    def test_plain_user_is_forbidden_even_with_invalid_payload(self, api_client, user_token):
        response = api_client.post(self.url, {}, format="json", HTTP_X_ACCESS_TOKEN=user_token)

        assert response.status_code == 403
        assert response.json()["message"] == "Require Admin Role!"

    def test_missing_token(self, api_client):
        response = api_client.post(self.url, {"username": "x", "password": "y"}, format="json")

        assert response.status_code == 403
        assert response.json()["message"] == "No token provided"

    def test_invalid_token(self, api_client):
        response = api_client.post(
            self.url,
            {"username": "x", "password": "y"},
            format="json",
            HTTP_X_ACCESS_TOKEN="garbage",
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized"

    def test_admin_missing_fields(self, api_client, admin_token):
        response = api_client.post(self.url, {"username": "x"}, format="json", HTTP_X_ACCESS_TOKEN=admin_token)

        assert response.status_code == 400

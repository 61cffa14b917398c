from django.urls import path

from .views import AdminRegisterView, LoginView, RegisterView


def build_urlpatterns(auth_service, token_issuer):
    return [
        path("auth/register", RegisterView.as_view(auth_service=auth_service), name="auth-register"),
        path(
            "auth/adm/register",
            AdminRegisterView.as_view(auth_service=auth_service, token_issuer=token_issuer),
            name="auth-admin-register",
        ),
        path("auth/login", LoginView.as_view(auth_service=auth_service), name="auth-login"),
    ]

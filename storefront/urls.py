"""
URL configuration for the storefront project.

Services are built once here and handed to the views through ``as_view()``.
"""
from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from cart.services import CartService
from cart.urls import build_urlpatterns as cart_urlpatterns
from product.services import CatalogService
from product.urls import build_urlpatterns as product_urlpatterns
from user.services import AuthService
from user.tokens import TokenIssuer
from user.urls import build_urlpatterns as auth_urlpatterns

from .views import index, ping

token_issuer = TokenIssuer(settings.JWT_SECRET, settings.JWT_TTL_SECONDS)
auth_service = AuthService(token_issuer)
catalog_service = CatalogService()
cart_service = CartService(catalog_service)

api_urlpatterns = [
    path("", index, name="index"),
    path("ping", ping, name="ping"),
    *auth_urlpatterns(auth_service, token_issuer),
    *product_urlpatterns(catalog_service, token_issuer),
    *cart_urlpatterns(cart_service, token_issuer),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),  # OpenAPI JSON/YAML
    path("schema/swagger-ui/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("schema/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/", include(api_urlpatterns)),
]

handler404 = "storefront.views.not_found"
handler500 = "storefront.views.server_error"

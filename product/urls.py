# product/urls.py
from django.urls import path

from .views import ProductDetailAPIView, ProductListCreateAPIView


def build_urlpatterns(catalog_service, token_issuer):
    deps = {"catalog_service": catalog_service, "token_issuer": token_issuer}
    return [
        path("products", ProductListCreateAPIView.as_view(**deps), name="product-list"),
        path("products/<int:pk>", ProductDetailAPIView.as_view(**deps), name="product-detail"),
    ]

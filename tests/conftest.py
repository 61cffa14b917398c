from decimal import Decimal

import pytest
from django.conf import settings
from rest_framework.test import APIClient

from cart.services import CartService
from product.models import Product
from product.services import CatalogService
from user.models import Role, User
from user.services import AuthService
from user.tokens import TokenIssuer

PASSWORD = "password123"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def token_issuer():
    # same secret as the issuer wired in storefront.urls
    return TokenIssuer(settings.JWT_SECRET, settings.JWT_TTL_SECONDS)


@pytest.fixture
def auth_service(token_issuer):
    return AuthService(token_issuer)


@pytest.fixture
def catalog_service():
    return CatalogService()


@pytest.fixture
def cart_service(catalog_service):
    return CartService(catalog_service)


@pytest.fixture
def user(db):
    return User.objects.create_user("testuser", PASSWORD)


@pytest.fixture
def admin_user(db):
    return User.objects.create_user("root", PASSWORD, roles=[Role.USER, Role.ADMIN])


@pytest.fixture
def user_token(user, token_issuer):
    return token_issuer.issue(user.project())


@pytest.fixture
def admin_token(admin_user, token_issuer):
    return token_issuer.issue(admin_user.project())


@pytest.fixture
def product(db):
    return Product.objects.create(
        name="Test Product",
        description="This is a test product",
        price=Decimal("100.00"),
        category="Test Category",
        stock=10,
    )


@pytest.fixture
def other_product(db):
    return Product.objects.create(
        name="Another Test Product",
        description="This is another test product",
        price=Decimal("150.00"),
        category="Another Test Category",
        stock=20,
    )

from django.urls import path

from .views import CartAddAPIView, CartClearAPIView, CartRemoveAPIView, CurrentCartAPIView


def build_urlpatterns(cart_service, token_issuer):
    deps = {"cart_service": cart_service, "token_issuer": token_issuer}
    return [
        path("cart", CurrentCartAPIView.as_view(**deps), name="cart-detail"),
        path("cart/add", CartAddAPIView.as_view(**deps), name="cart-add"),
        path("cart/remove/<int:product_id>", CartRemoveAPIView.as_view(**deps), name="cart-remove"),
        path("cart/clear", CartClearAPIView.as_view(**deps), name="cart-clear"),
    ]

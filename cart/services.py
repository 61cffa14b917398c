# cart/services.py
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from storefront.errors import NotFound, ValidationError

from .models import Cart, CartItem

CART_NOT_FOUND = "Cart not found"
INVALID_QUANTITY = "Quantity must be a positive integer"

# largest value a PositiveIntegerField holds on every database backend
MAX_QUANTITY = 2147483647
QUANTITY_LIMIT = f"Quantity cannot exceed {MAX_QUANTITY}"


class CartService:
    """
    Per-user cart with lazy creation.

    Item quantities are changed with conditional database updates keyed by
    (cart, product) instead of rewriting the whole item list, so concurrent
    adds for the same user do not lose increments.
    """

    def __init__(self, catalog_service):
        self.catalog_service = catalog_service

    def get_or_create(self, user_id):
        try:
            return Cart.objects.get(user_id=user_id)
        except Cart.DoesNotExist:
            pass

        if not get_user_model().objects.filter(pk=user_id).exists():
            raise NotFound(CART_NOT_FOUND)
        try:
            # a concurrent first access trips the unique index on user and
            # get_or_create falls back to fetching the winner's cart
            cart, _ = Cart.objects.get_or_create(user_id=user_id)
        except IntegrityError:
            raise NotFound(CART_NOT_FOUND)
        return cart

    def get(self, user_id):
        return self._resolved(self.get_or_create(user_id))

    def add_item(self, user_id, product_id, quantity):
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError(INVALID_QUANTITY)
        if quantity > MAX_QUANTITY:
            raise ValidationError(QUANTITY_LIMIT)
        self.catalog_service.get_by_id(product_id)

        cart = self.get_or_create(user_id)
        with transaction.atomic():
            if not self._increment(cart, product_id, quantity):
                try:
                    with transaction.atomic():
                        CartItem.objects.create(cart=cart, product_id=product_id, quantity=quantity)
                except IntegrityError:
                    # the line exists: inserted concurrently, or already too
                    # close to the limit for this increment
                    if not self._increment(cart, product_id, quantity):
                        raise ValidationError(QUANTITY_LIMIT)
            self._touch(cart)
        return self._resolved(cart)

    def remove_item(self, user_id, product_id):
        cart = self.get_or_create(user_id)
        with transaction.atomic():
            CartItem.objects.filter(cart=cart, product_id=product_id).delete()
            self._touch(cart)
        return self._resolved(cart)

    def clear(self, user_id):
        cart = self.get_or_create(user_id)
        with transaction.atomic():
            CartItem.objects.filter(cart=cart).delete()
            self._touch(cart)
        return self._resolved(cart)

    def _increment(self, cart, product_id, quantity):
        return CartItem.objects.filter(
            cart=cart, product_id=product_id, quantity__lte=MAX_QUANTITY - quantity
        ).update(quantity=F("quantity") + quantity)

    def _touch(self, cart):
        Cart.objects.filter(pk=cart.pk).update(updated_at=timezone.now())

    def _resolved(self, cart):
        """
        Reload the cart with its lines and attach each line's product as
        ``resolved_product`` (None when the product has been deleted).
        """
        cart = Cart.objects.prefetch_related("items").get(pk=cart.pk)
        items = list(cart.items.all())
        products = self.catalog_service.get_many(item.product_id for item in items)
        for item in items:
            item.resolved_product = products.get(item.product_id)
        return cart

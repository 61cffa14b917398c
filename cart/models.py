from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from product.models import Product

User = settings.AUTH_USER_MODEL


class Cart(models.Model):
    # one cart per user, the unique index settles lazy-create races
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="cart")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Cart {self.pk} of user {self.user_id}"


class CartItem(models.Model):
    cart = models.ForeignKey(Cart, on_delete=models.CASCADE, related_name="items")
    # weak reference: deleting a product leaves the line in place
    product = models.ForeignKey(
        Product,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="+",
    )
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    added_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ("cart", "product")
        ordering = ("added_at", "id")

    def __str__(self):
        return f"{self.cart_id} - {self.product_id} x{self.quantity}"

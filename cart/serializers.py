from rest_framework import serializers

from product.serializers import ProductBriefSerializer

from .models import Cart, CartItem
from .services import MAX_QUANTITY


class CartItemSerializer(serializers.ModelSerializer):
    productId = serializers.IntegerField(source="product_id", read_only=True)
    # null when the product was deleted after being added
    product = serializers.SerializerMethodField()
    addedAt = serializers.DateTimeField(source="added_at", read_only=True)

    class Meta:
        model = CartItem
        fields = ("id", "productId", "product", "quantity", "addedAt")

    def get_product(self, obj):
        product = getattr(obj, "resolved_product", None)
        if product is None:
            return None
        return ProductBriefSerializer(product).data


class CartSerializer(serializers.ModelSerializer):
    user = serializers.IntegerField(source="user_id", read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Cart
        fields = ("id", "user", "items", "createdAt", "updatedAt")


class AddToCartSerializer(serializers.Serializer):
    productId = serializers.IntegerField()
    quantity = serializers.IntegerField(required=False, default=1, max_value=MAX_QUANTITY)

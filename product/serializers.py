from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    imageUrl = serializers.URLField(source="image_url", required=False, allow_null=True, allow_blank=True, max_length=500)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = (
            "id", "name", "description", "price", "category", "stock",
            "imageUrl", "createdAt", "updatedAt",
        )
        read_only_fields = ("id",)
        # name uniqueness is reported by the catalog service as a conflict
        extra_kwargs = {"name": {"validators": []}}


class ProductBriefSerializer(serializers.ModelSerializer):
    # minimal product shape for cart lines
    imageUrl = serializers.URLField(source="image_url", read_only=True)

    class Meta:
        model = Product
        fields = ("id", "name", "price", "category", "imageUrl")

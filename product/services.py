# product/services.py
from django.db import IntegrityError, transaction

from storefront.errors import Conflict, NotFound, ValidationError

from .models import Product

REQUIRED_FIELDS = ("name", "description", "price", "category", "stock")
UPDATABLE_FIELDS = REQUIRED_FIELDS + ("image_url",)

PRODUCT_EXISTS = "Product already exists"
PRODUCT_NOT_FOUND = "Product not found"


class CatalogService:
    def list(self):
        return list(Product.objects.order_by("id"))

    def get_by_id(self, product_id):
        try:
            return Product.objects.get(pk=product_id)
        except (Product.DoesNotExist, ValueError, TypeError, OverflowError):
            raise NotFound(PRODUCT_NOT_FOUND)

    def get_many(self, product_ids):
        """Map id -> product for the ids that still exist."""
        return Product.objects.in_bulk(set(product_ids))

    def create(self, data):
        missing = [name for name in REQUIRED_FIELDS if data.get(name) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        fields = {name: data[name] for name in UPDATABLE_FIELDS if name in data}
        if Product.objects.filter(name=fields["name"]).exists():
            raise Conflict(PRODUCT_EXISTS)
        try:
            with transaction.atomic():
                return Product.objects.create(**fields)
        except IntegrityError:
            raise Conflict(PRODUCT_EXISTS)

    def update(self, product_id, data):
        """Merge only the supplied fields into the stored product."""
        product = self.get_by_id(product_id)
        changes = {name: data[name] for name in UPDATABLE_FIELDS if name in data}
        if not changes:
            return product

        new_name = changes.get("name")
        if new_name is not None and Product.objects.filter(name=new_name).exclude(pk=product.pk).exists():
            raise Conflict(PRODUCT_EXISTS)

        for name, value in changes.items():
            setattr(product, name, value)
        try:
            with transaction.atomic():
                product.save(update_fields=[*changes, "updated_at"])
        except IntegrityError:
            raise Conflict(PRODUCT_EXISTS)
        return product

    def delete(self, product_id):
        # cart lines pointing at the product are left alone
        deleted, _ = Product.objects.filter(pk=product_id).delete()
        if not deleted:
            raise NotFound(PRODUCT_NOT_FOUND)

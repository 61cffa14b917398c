import logging

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response

from storefront.views import TokenAuthenticatedAPIView
from user.permissions import IsAdmin

from .serializers import ProductSerializer

logger = logging.getLogger(__name__)


class CatalogAPIView(TokenAuthenticatedAPIView):
    """Reads are public, writes need the admin role."""
    catalog_service = None
    forbidden_message = "Require Admin Role!"

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [IsAdmin()]


class ProductListCreateAPIView(CatalogAPIView):

    @extend_schema(responses=ProductSerializer(many=True))
    def get(self, request):
        products = self.catalog_service.list()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(request=ProductSerializer, responses={201: ProductSerializer})
    def post(self, request):
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = self.catalog_service.create(serializer.validated_data)
        logger.info("Product %s created by %s", product.pk, request.user.username)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class ProductDetailAPIView(CatalogAPIView):

    @extend_schema(responses=ProductSerializer)
    def get(self, request, pk):
        product = self.catalog_service.get_by_id(pk)
        return Response(ProductSerializer(product).data)

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def put(self, request, pk):
        """Partial update, only the supplied fields change."""
        serializer = ProductSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        product = self.catalog_service.update(pk, serializer.validated_data)
        logger.info("Product %s updated by %s", product.pk, request.user.username)
        return Response(ProductSerializer(product).data)

    @extend_schema(responses={204: None})
    def delete(self, request, pk):
        self.catalog_service.delete(pk)
        logger.info("Product %s deleted by %s", pk, request.user.username)
        return Response(status=status.HTTP_204_NO_CONTENT)

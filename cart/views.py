import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from storefront.views import TokenAuthenticatedAPIView
from user.permissions import HasCredential

from .serializers import AddToCartSerializer, CartSerializer

logger = logging.getLogger(__name__)


class CartAPIView(TokenAuthenticatedAPIView):
    permission_classes = [HasCredential]
    cart_service = None

    def render_cart(self, cart):
        return Response(CartSerializer(cart).data, status=status.HTTP_200_OK)


class CurrentCartAPIView(CartAPIView):

    @extend_schema(responses=CartSerializer)
    def get(self, request, format=None):
        return self.render_cart(self.cart_service.get(request.user.user_id))


class CartAddAPIView(CartAPIView):

    @extend_schema(request=AddToCartSerializer, responses=CartSerializer)
    def post(self, request, format=None):
        """
        Expected payload:
        {
            "productId": <id>,
            "quantity": <int>
        }
        """
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product_id = serializer.validated_data["productId"]
        quantity = serializer.validated_data["quantity"]

        cart = self.cart_service.add_item(request.user.user_id, product_id, quantity)
        logger.debug("User %s added product %s x%s", request.user.user_id, product_id, quantity)
        return self.render_cart(cart)


class CartRemoveAPIView(CartAPIView):

    @extend_schema(responses=CartSerializer)
    def delete(self, request, product_id, format=None):
        return self.render_cart(self.cart_service.remove_item(request.user.user_id, product_id))


class CartClearAPIView(CartAPIView):

    @extend_schema(responses=CartSerializer)
    def delete(self, request, format=None):
        return self.render_cart(self.cart_service.clear(request.user.user_id))

from django.http import JsonResponse
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from user.authentication import AccessTokenAuthentication

from .errors import Internal


class TokenAuthenticatedAPIView(APIView):
    """
    Base view for endpoints that may read an ``x-access-token``.

    ``token_issuer`` is injected through ``as_view()``. Authentication is
    deferred until a permission class asks for ``request.user``, so public
    methods never verify a token.
    """
    token_issuer = None

    def get_authenticators(self):
        return [AccessTokenAuthentication(self.token_issuer)]

    def perform_authentication(self, request):
        pass


@api_view(["GET"])
def index(request):
    return Response({"status": True})


@api_view(["GET"])
def ping(request):
    return Response({"pong": True})


# Django-level fallbacks for requests that never reach a DRF view,
# e.g. a path segment the URL converters reject.
def not_found(request, exception=None):
    code = status.HTTP_404_NOT_FOUND
    return JsonResponse({"status": code, "message": "Not found"}, status=code)


def server_error(request):
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JsonResponse({"status": code, "message": Internal.default_message}, status=code)

# user/authentication.py
from drf_spectacular.extensions import OpenApiAuthenticationExtension
from rest_framework.authentication import BaseAuthentication


class AccessTokenAuthentication(BaseAuthentication):
    """
    Read the bearer token from the ``x-access-token`` header.

    Returns None when the header is absent so public endpoints keep working;
    a present but bad token raises InvalidToken/TokenExpired.
    """
    header = "HTTP_X_ACCESS_TOKEN"

    def __init__(self, token_issuer):
        self.token_issuer = token_issuer

    def authenticate(self, request):
        token = request.META.get(self.header)
        if not token:
            return None
        credential = self.token_issuer.verify(token)
        return credential, token


class AccessTokenScheme(OpenApiAuthenticationExtension):
    target_class = "user.authentication.AccessTokenAuthentication"
    name = "accessToken"

    def get_security_definition(self, auto_schema):
        return {"type": "apiKey", "in": "header", "name": "x-access-token"}

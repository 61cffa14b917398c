# user/views.py
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from storefront.errors import ValidationError
from storefront.views import TokenAuthenticatedAPIView

from .permissions import IsAdmin
from .serializers import CredentialsSerializer, TokenSerializer, UserSerializer

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_PAYLOAD = "The username and/or password parameter must be a string"


def read_credentials(request):
    serializer = CredentialsSerializer(data=request.data)
    if not serializer.is_valid():
        raise ValidationError(INVALID_CREDENTIALS_PAYLOAD)
    return serializer.validated_data["username"], serializer.validated_data["password"]


class RegisterView(APIView):
    authentication_classes = []
    permission_classes = []
    auth_service = None

    @extend_schema(request=CredentialsSerializer, responses={201: UserSerializer})
    def post(self, request):
        username, password = read_credentials(request)
        user = self.auth_service.register(username, password)
        logger.info("Registered user %s (id=%s)", user["username"], user["id"])
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class AdminRegisterView(TokenAuthenticatedAPIView):
    permission_classes = [IsAdmin]
    forbidden_message = "Require Admin Role!"
    auth_service = None

    @extend_schema(request=CredentialsSerializer, responses={201: UserSerializer})
    def post(self, request):
        username, password = read_credentials(request)
        user = self.auth_service.register_admin(username, password)
        logger.info(
            "Admin %s registered admin user %s (id=%s)",
            request.user.username, user["username"], user["id"],
        )
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    authentication_classes = []
    permission_classes = []
    auth_service = None

    @extend_schema(request=CredentialsSerializer, responses={200: TokenSerializer})
    def post(self, request):
        username, password = read_credentials(request)
        token = self.auth_service.login(username, password)
        logger.info("User %s logged in", username)
        return Response({"token": token}, status=status.HTTP_200_OK)

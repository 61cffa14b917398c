# user/services.py
from django.db import IntegrityError, transaction

from storefront.errors import Conflict, InvalidPassword, NotFound

from .models import Role, User

USER_EXISTS = "User already exists"


class AuthService:
    """Registration and login on top of the credential store."""

    def __init__(self, token_issuer):
        self.token_issuer = token_issuer

    def register(self, username, password, roles=(Role.USER,)):
        if User.objects.filter(username=username).exists():
            raise Conflict(USER_EXISTS)
        try:
            with transaction.atomic():
                user = User.objects.create_user(username, password, roles=roles)
        except IntegrityError:
            # lost a race against a concurrent registration
            raise Conflict(USER_EXISTS)
        return user.project()

    def register_admin(self, username, password):
        return self.register(username, password, roles=(Role.USER, Role.ADMIN))

    def login(self, username, password):
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            raise NotFound("User not found")
        if not user.check_password(password):
            raise InvalidPassword()
        return self.token_issuer.issue(user.project())

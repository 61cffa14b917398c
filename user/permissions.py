# user/permissions.py
from rest_framework.permissions import BasePermission

from storefront.errors import Forbidden, MissingToken

from .models import Role
from .policy import Decision, require_role
from .tokens import Credential


class HasCredential(BasePermission):
    def has_permission(self, request, view):
        if not isinstance(request.user, Credential):
            raise MissingToken()
        return True


class HasRole(HasCredential):
    """
    Raise Forbidden with the view's ``forbidden_message`` when the caller
    lacks ``role``.
    """
    role = None

    def has_permission(self, request, view):
        super().has_permission(request, view)
        if require_role(request.user, self.role) is Decision.DENIED:
            raise Forbidden(getattr(view, "forbidden_message", None))
        return True


class IsAdmin(HasRole):
    role = Role.ADMIN

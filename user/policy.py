# user/policy.py
from enum import Enum

from .models import Role


class Decision(Enum):
    ALLOWED = "allowed"
    DENIED = "denied"


def require_role(credential, role):
    """Allow the caller only if the credential carries ``role``."""
    if credential is not None and Role(role) in credential.roles:
        return Decision.ALLOWED
    return Decision.DENIED

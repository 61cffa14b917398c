# user/models.py
from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.db import models


class Role(models.TextChoices):
    USER = "user", "User"
    ADMIN = "admin", "Admin"


def default_roles():
    return [Role.USER.value]


def normalize_roles(roles):
    """
    Return roles as a de-duplicated list of known role values.
    Raises ValueError for anything outside the Role enum.
    """
    out = []
    for raw in roles or default_roles():
        role = Role(raw)
        if role.value not in out:
            out.append(role.value)
    return out


class UserManager(DjangoUserManager):
    use_in_migrations = True

    def create_user(self, username, password=None, roles=None, **extra_fields):
        if not username:
            raise ValueError("Users must have a username")
        roles = normalize_roles(roles)
        extra_fields.setdefault("is_staff", Role.ADMIN.value in roles)
        user = self.model(username=username, roles=roles, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)
        return self.create_user(
            username,
            password=password,
            roles=[Role.USER, Role.ADMIN],
            **extra_fields,
        )


class User(AbstractUser):
    roles = models.JSONField(default=default_roles)

    REQUIRED_FIELDS = []

    objects = UserManager()

    def __str__(self):
        return self.username

    def has_role(self, role):
        return Role(role).value in self.roles

    def project(self):
        """Public view of the user, never includes the password hash."""
        return {
            "id": self.id,
            "username": self.username,
            "roles": list(self.roles),
        }

"""
Domain errors raised by the services.

Services raise these and never build HTTP responses themselves; the mapping
to status codes lives in ``storefront.exception_handler``.
"""


class StoreError(Exception):
    default_message = "Something went wrong"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StoreError):
    default_message = "Invalid input"


class Conflict(StoreError):
    default_message = "Resource already exists"


class NotFound(StoreError):
    default_message = "Not found"


class Unauthorized(StoreError):
    default_message = "Unauthorized"


class InvalidPassword(Unauthorized):
    default_message = "Invalid password"


class InvalidToken(Unauthorized):
    pass


class TokenExpired(Unauthorized):
    pass


class MissingToken(Unauthorized):
    default_message = "No token provided"


class Forbidden(StoreError):
    default_message = "Forbidden"


class Internal(StoreError):
    default_message = "Internal server error"

# storefront/exception_handler.py
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from . import errors

logger = logging.getLogger(__name__)

# first match wins, so subclasses go before their parents
STATUS_BY_ERROR = (
    (errors.InvalidPassword, status.HTTP_400_BAD_REQUEST),
    (errors.MissingToken, status.HTTP_403_FORBIDDEN),
    (errors.Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (errors.Forbidden, status.HTTP_403_FORBIDDEN),
    (errors.NotFound, status.HTTP_404_NOT_FOUND),
    (errors.Conflict, status.HTTP_400_BAD_REQUEST),
    (errors.ValidationError, status.HTTP_400_BAD_REQUEST),
)


def _body(code, message, **extra):
    return {"status": code, "message": message, **extra}


def _status_for(exc):
    for error_class, code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def store_exception_handler(exc, context):
    """
    Render every failure as ``{status, message}``.

    Domain errors are mapped by kind, DRF's own exceptions keep their status
    code, anything else is logged and reported as a bare 500.
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, errors.StoreError) and not isinstance(exc, errors.Internal):
        code = _status_for(exc)
        if isinstance(exc, (errors.InvalidToken, errors.TokenExpired)):
            logger.info("Rejected access token in %s: %s", view_name, exc.message)
            return Response(_body(code, "Unauthorized"), status=code)
        return Response(_body(code, exc.message), status=code)

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data
        if isinstance(detail, dict) and set(detail) == {"detail"}:
            response.data = _body(response.status_code, str(detail["detail"]))
        else:
            response.data = _body(response.status_code, "Invalid request data", errors=detail)
        return response

    logger.exception("Unhandled error in %s", view_name)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(_body(code, errors.Internal.default_message), status=code)

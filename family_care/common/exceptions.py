"""API error taxonomy.

Every error leaves the API as ``{"error": "<code>"}``. Views raise ``ApiError``
(or one of its subclasses) with a machine-readable code; framework errors are
mapped onto the same envelope by ``api_exception_handler``.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import set_rollback

logger = logging.getLogger(__name__)


class ApiError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request."
    default_code = "invalid_request"

    def __init__(self, code: str | None = None, status_code: int | None = None):
        super().__init__(detail=code or self.default_code, code=code)
        self.error_code = code or self.default_code
        if status_code is not None:
            self.status_code = status_code


class ApiNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"


class ApiServerError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "server_error"


def _error_code(exc: exceptions.APIException) -> str:
    if isinstance(exc, ApiError):
        return exc.error_code
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return "unauthorized"
    if isinstance(exc, exceptions.PermissionDenied):
        return "forbidden"
    if isinstance(exc, exceptions.NotFound):
        return "not_found"
    if isinstance(exc, exceptions.ValidationError):
        return "invalid_request"
    if isinstance(exc, exceptions.MethodNotAllowed):
        return "method_not_allowed"
    if isinstance(exc, exceptions.ParseError):
        return "invalid_json"
    return str(exc.default_code)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Render every API failure as ``{"error": code}``.

    Storage failures are terminal and collapse to ``db_error``: the caller gets
    no hint about which step of a multi-statement handler failed.
    """

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("Database error in %s", type(view).__name__)
        set_rollback()
        return Response(
            {"error": "db_error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if not isinstance(exc, exceptions.APIException):
        return None

    status_code = exc.status_code
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        status_code = status.HTTP_401_UNAUTHORIZED

    headers = {}
    if getattr(exc, "auth_header", None):
        headers["WWW-Authenticate"] = exc.auth_header
    if getattr(exc, "wait", None):
        headers["Retry-After"] = f"{int(exc.wait)}"

    set_rollback()
    return Response({"error": _error_code(exc)}, status=status_code, headers=headers)

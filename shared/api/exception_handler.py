"""Maps exceptions raised inside API views to the error envelope."""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.db import IntegrityError  # type: ignore
from django.db.models import ProtectedError, RestrictedError  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.serializers import as_serializer_error  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from shared.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


def flatten_errors(detail, prefix: str = "") -> list[dict]:
    """Turn DRF's nested error structure into ``[{"field": ..., "msg": ...}]``."""
    items: list[dict] = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            field = key if key != "non_field_errors" else ""
            path = f"{prefix}.{field}" if prefix and field else (field or prefix)
            items.extend(flatten_errors(value, path))
    elif isinstance(detail, list):
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                items.extend(flatten_errors(value, f"{prefix}[{index}]" if prefix else str(index)))
            else:
                items.append({"field": prefix or None, "msg": str(value)})
    else:
        items.append({"field": prefix or None, "msg": str(detail)})
    return items


def error_response(message: str, status_code: int, details=None) -> Response:
    body = {"success": False, "error": message}
    if details:
        body["details"] = details
    return Response(body, status=status_code)


def envelope_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER`` producing ``{success, error, details?}``."""
    if isinstance(exc, DomainError):
        return error_response(exc.message, exc.status_code, exc.details)

    if isinstance(exc, (ProtectedError, RestrictedError)):
        return error_response(
            "Resource is referenced by other records and cannot be deleted",
            status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, IntegrityError):
        logger.info("Integrity error in %s: %s", _view_name(context), exc)
        return error_response("Duplicate or conflicting value", status.HTTP_409_CONFLICT)

    if isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(as_serializer_error(exc))

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.error("Unhandled error in %s", _view_name(context), exc_info=exc)
        return error_response("Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "success": False,
            "error": "Validation Error",
            "details": flatten_errors(response.data),
        }
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
    response.data = {"success": False, "error": str(detail)}
    return response


def _view_name(context) -> str:
    view = context.get("view") if context else None
    return view.__class__.__name__ if view is not None else "unknown view"

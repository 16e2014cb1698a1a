"""
Application-wide error categories and the DRF exception handler.

Every app defines its domain exceptions in `services/exceptions.py` as
subclasses of the categories below. The handler turns those, and DRF's own
exceptions, into a uniform body:

    {"error": "NOT_FOUND", "message": "Event not found"}

Hierarchy:
    ApplicationError
    ├── UnauthorizedError     401 UNAUTHORIZED
    ├── ForbiddenError        403 FORBIDDEN
    ├── NotFoundError         404 NOT_FOUND
    ├── ValidationError       400 VALIDATION_ERROR
    ├── BadRequestError       400 BAD_REQUEST
    ├── ExternalServiceError  500 EXTERNAL_SERVICE_ERROR
    └── InternalError         500 INTERNAL_ERROR
"""

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'An unexpected error occurred'


class ApplicationError(Exception):
    """Base exception for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = 'INTERNAL_ERROR'

    def __init__(self, message: str = ''):
        self.message = message
        super().__init__(message)


class UnauthorizedError(ApplicationError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = 'UNAUTHORIZED'


class ForbiddenError(ApplicationError):
    """Raised when the caller does not own the resource they act on."""

    status_code = status.HTTP_403_FORBIDDEN
    error_code = 'FORBIDDEN'


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = 'NOT_FOUND'


class ValidationError(ApplicationError):
    """Raised by services for malformed input the serializers cannot see."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = 'VALIDATION_ERROR'


class BadRequestError(ApplicationError):
    """Raised when a request breaks a business rule (duplicates, bad transitions)."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = 'BAD_REQUEST'


class ExternalServiceError(ApplicationError):
    """Raised when Cloudinary or Stripe calls fail."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = 'EXTERNAL_SERVICE_ERROR'


class InternalError(ApplicationError):
    pass


def error_body(error_code: str, message: str) -> dict:
    return {'error': error_code, 'message': message}


def _flatten_errors(detail, field=None) -> list[str]:
    """Flatten nested serializer errors into `field: reason` strings."""
    if isinstance(detail, dict):
        messages = []
        for key, value in detail.items():
            name = key if field is None else f'{field}.{key}'
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                name = field
            messages.extend(_flatten_errors(value, name))
        return messages
    if isinstance(detail, list):
        messages = []
        for item in detail:
            messages.extend(_flatten_errors(item, field))
        return messages
    return [f'{field}: {detail}' if field else str(detail)]


def api_exception_handler(exc, context):
    """Render every error raised inside a DRF view as `{error, message}`."""
    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown'

    if isinstance(exc, ApplicationError):
        if exc.status_code >= 500:
            logger.error("%s in %s: %s", type(exc).__name__, view_name, exc.message, exc_info=exc)
            message = exc.message or INTERNAL_ERROR_MESSAGE
            if exc.error_code == InternalError.error_code:
                message = INTERNAL_ERROR_MESSAGE
        else:
            logger.warning("%s in %s: %s", type(exc).__name__, view_name, exc.message)
            message = exc.message
        return Response(error_body(exc.error_code, message), status=exc.status_code)

    if isinstance(exc, drf_exceptions.ValidationError):
        message = '; '.join(_flatten_errors(exc.detail)) or 'Invalid input'
        logger.warning("Validation failed in %s: %s", view_name, message)
        return Response(error_body('VALIDATION_ERROR', message), status=status.HTTP_400_BAD_REQUEST)

    # DRF converts Http404/PermissionDenied and adds WWW-Authenticate on 401
    response = drf_exception_handler(exc, context)
    if response is None:
        logger.error("Unhandled error in %s", view_name, exc_info=exc)
        return Response(
            error_body('INTERNAL_ERROR', INTERNAL_ERROR_MESSAGE),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
        error_code = 'UNAUTHORIZED'
    elif isinstance(exc, (drf_exceptions.PermissionDenied, PermissionDenied)):
        error_code = 'FORBIDDEN'
    elif isinstance(exc, (drf_exceptions.NotFound, Http404)):
        error_code = 'NOT_FOUND'
    elif response.status_code == status.HTTP_400_BAD_REQUEST:
        error_code = 'BAD_REQUEST'
    else:
        error_code = getattr(exc, 'default_code', 'error').upper()

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    response.data = error_body(error_code, str(detail) if detail is not None else str(exc))
    return response

"""
DRF exception handler for the workshop back-office.

Translates business exceptions into HTTP responses with one error format:

    {error, error_code, message, details, timestamp}

Flow: DAL (Django errors) -> business exceptions -> this handler -> HTTP.
Views never catch business exceptions themselves.
"""

import logging
import traceback

from django.conf import settings
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.shared.exceptions import AppError
from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import ConfigurationError
from apps.shared.exceptions import PermissionError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


# (exception type, title, status, log level); first match wins
BUSINESS_EXCEPTION_MAP = (
    (ResourceNotFoundError, 'Resource Not Found', status.HTTP_404_NOT_FOUND, logging.INFO),
    (BusinessRuleViolation, 'Business Rule Violation', status.HTTP_409_CONFLICT, logging.WARNING),
    (ValidationError, 'Validation Error', status.HTTP_400_BAD_REQUEST, logging.INFO),
    (PermissionError, 'Permission Denied', status.HTTP_403_FORBIDDEN, logging.WARNING),
    (ServiceUnavailableError, 'Service Unavailable', status.HTTP_503_SERVICE_UNAVAILABLE, logging.ERROR),
    (AuthenticationError, 'Authentication Failed', status.HTTP_401_UNAUTHORIZED, logging.WARNING),
    (ConfigurationError, 'Configuration Error', status.HTTP_500_INTERNAL_SERVER_ERROR, logging.ERROR),
    (AppError, 'Application Error', status.HTTP_400_BAD_REQUEST, logging.ERROR),
)


def custom_exception_handler(exc, context):
    """
    Called by DRF for every exception raised inside an API view.

    DRF's own exceptions (serializer validation, authentication, storage
    APIExceptions) keep their status and gain a timestamp and error_code.
    Business exceptions are mapped through BUSINESS_EXCEPTION_MAP.
    """
    request_info = _extract_request_info(context.get('request'), context.get('view'))

    response = exception_handler(exc, context)
    if response is not None:
        logger.info(f'DRF exception in API: {type(exc).__name__}: {exc} | Request: {request_info}')
        return _format_drf_response(response, exc)

    if isinstance(exc, AppError):
        return _handle_business_exception(exc, request_info)

    if isinstance(exc, DjangoPermissionDenied):
        logger.warning(f'Django PermissionDenied caught in API handler: {request_info}')
        return Response(
            {
                'error': 'Permission Denied',
                'error_code': 'django_permission_denied',
                'message': 'Access denied',
                'timestamp': _get_timestamp(),
            },
            status=status.HTTP_403_FORBIDDEN,
        )

    if isinstance(exc, Http404):
        return Response(
            {
                'error': 'Not Found',
                'error_code': 'resource_not_found',
                'message': 'The requested resource was not found',
                'timestamp': _get_timestamp(),
            },
            status=status.HTTP_404_NOT_FOUND,
        )

    return _handle_unhandled_exception(exc, request_info)


def _handle_business_exception(exc: AppError, request_info: dict) -> Response:
    for exc_type, title, status_code, level in BUSINESS_EXCEPTION_MAP:
        if isinstance(exc, exc_type):
            break

    logger.log(level, f'Business exception in API: {type(exc).__name__}: {exc} | Request: {request_info}')

    if isinstance(exc, BusinessRuleViolation) and (
        'validation' in exc.error_code.lower() or 'invalid' in exc.error_code.lower()
    ):
        status_code = status.HTTP_400_BAD_REQUEST

    body = {
        'error': title,
        'error_code': exc.error_code,
        'message': str(exc),
        'details': exc.get_context(),
        'timestamp': _get_timestamp(),
    }

    if isinstance(exc, ServiceUnavailableError):
        body['message'] = 'A required service is temporarily unavailable'
        body['details'] = {'service_error': str(exc)}

    if isinstance(exc, ValidationError) and exc.field_errors:
        body['field_errors'] = exc.field_errors

    return Response(body, status=status_code)


def _handle_unhandled_exception(exc, request_info: dict) -> Response:
    logger.error(
        f'UNHANDLED EXCEPTION in API: {type(exc).__name__}: {exc}\n'
        f'Request: {request_info}\n'
        f'Traceback: {traceback.format_exc()}'
    )

    return Response(
        {
            'error': 'Internal Server Error',
            'error_code': 'internal_server_error',
            'message': 'An unexpected error occurred. Please try again later.',
            'timestamp': _get_timestamp(),
            'details': _get_debug_details(exc) if settings.DEBUG else {},
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _format_drf_response(response: Response, exc: Exception) -> Response:
    if isinstance(response.data, dict):
        response.data['timestamp'] = _get_timestamp()
        response.data['error_code'] = getattr(exc, 'default_code', type(exc).__name__)
    return response


def _extract_request_info(request, view) -> dict:
    if not request:
        return {'method': 'unknown', 'path': 'unknown', 'user': 'unknown'}

    return {
        'method': getattr(request, 'method', 'unknown'),
        'path': getattr(request, 'path', 'unknown'),
        'user': getattr(request.user, 'id', 'anonymous') if hasattr(request, 'user') else 'unknown',
        'view': f'{view.__class__.__module__}.{view.__class__.__name__}' if view else 'unknown',
    }


def _get_timestamp() -> str:
    return timezone.now().isoformat()


def _get_debug_details(exc: Exception) -> dict:
    return {
        'exception_type': type(exc).__name__,
        'exception_message': str(exc),
        'traceback': traceback.format_exc().split('\n'),
    }

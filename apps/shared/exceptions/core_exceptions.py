"""
Core business exception hierarchy for the workshop back-office.

- DAL translates Django errors into these exceptions
- Services raise them for domain failures (missing template, locked assignment)
- The API exception handler maps them to HTTP responses

These exceptions describe BUSINESS failures, not HTTP responses.
"""

import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """
    Base class for all business errors in the application.

    HTTP status codes are chosen by the API exception handler, never here.
    """

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def get_context(self) -> dict:
        """Get additional error context for logging/debugging"""
        return self.context


class ResourceNotFoundError(AppError):
    """
    Raised when a requested resource doesn't exist.

    Examples:
    - Workshop not found by date
    - Contract template deleted while still assigned
    - Trainer code unknown

    HTTP Mapping: 404 NOT FOUND
    """


class BusinessRuleViolation(AppError):
    """
    Raised when an action violates a business rule.

    Examples:
    - Unassigning a contract the trainer already accepted
    - Second client contract for the same workshop
    - Assigning a client template to a trainer

    HTTP Mapping: 409 CONFLICT (400 when the error code mentions validation)
    """


class ValidationError(AppError):
    """
    Raised when input data fails business validation.

    HTTP Mapping: 400 BAD REQUEST
    """

    def __init__(self, message: str, field_errors: dict = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_errors = field_errors or {}


class PermissionError(AppError):
    """
    Raised when the caller lacks a required permission.

    HTTP Mapping: 403 FORBIDDEN
    """


class ServiceUnavailableError(AppError):
    """
    Raised when an infrastructure dependency fails (database, object storage).

    HTTP Mapping: 503 SERVICE UNAVAILABLE
    """


class AuthenticationError(AppError):
    """
    Raised when authentication fails at the business layer.

    HTTP Mapping: 401 UNAUTHORIZED
    """


class ConfigurationError(AppError):
    """
    Raised when application configuration is invalid (unknown bucket alias,
    unsupported storage provider).

    HTTP Mapping: 500 INTERNAL SERVER ERROR
    """

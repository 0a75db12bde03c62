import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from django.db import IntegrityError

from apps.shared.exceptions import AppError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


class DatabaseErrorHandler:
    """
    Translates Django/database errors raised in DAL methods into business
    exceptions, keeping the call context for logging.
    """

    def __init__(self, operation_type: str = 'database_operation'):
        self.operation_type = operation_type
        # Order matters: IntegrityError subclasses DatabaseError
        self.error_mappings = {
            ObjectDoesNotExist: self._handle_not_found_error,
            IntegrityError: self._handle_integrity_error,
            DjangoValidationError: self._handle_validation_error,
            DatabaseError: self._handle_database_error,
        }

    def _handle_integrity_error(self, error: IntegrityError, context: dict[str, Any]) -> ValidationError:
        logger.warning(
            f'Integrity constraint violation in {self.operation_type}: {error}',
            extra={'operation': self.operation_type, 'context': context},
        )
        return ValidationError(
            message=f'Data integrity violation: {error!s}',
            error_code=f'{self.operation_type}_integrity_error',
            context={'original_error': str(error), 'constraint_violation': True, **context},
        )

    def _handle_validation_error(self, error: DjangoValidationError, context: dict[str, Any]) -> ValidationError:
        logger.warning(
            f'Validation error in {self.operation_type}: {error}',
            extra={'operation': self.operation_type, 'context': context},
        )

        if hasattr(error, 'error_dict'):
            field_errors = error.message_dict
        else:
            field_errors = {'non_field_errors': error.messages}

        return ValidationError(
            message=f'Validation failed: {error!s}',
            field_errors=field_errors,
            error_code=f'{self.operation_type}_validation_error',
            context={'original_error': str(error), 'django_validation': True, **context},
        )

    def _handle_database_error(self, error: DatabaseError, context: dict[str, Any]) -> ServiceUnavailableError:
        logger.critical(
            f'Database infrastructure error in {self.operation_type}: {error}',
            extra={'operation': self.operation_type, 'context': context},
            exc_info=True,
        )
        return ServiceUnavailableError(
            message='Database service is temporarily unavailable',
            error_code=f'{self.operation_type}_database_error',
            context={'original_error': str(error), 'infrastructure_failure': True, **context},
        )

    def _handle_not_found_error(self, error: ObjectDoesNotExist, context: dict[str, Any]) -> ResourceNotFoundError:
        model_name = context.get('model_name', 'Resource')
        identifier = context.get('identifier', 'unknown')

        logger.debug(
            f'Resource not found in {self.operation_type}: {model_name} {identifier}',
            extra={'operation': self.operation_type, 'context': context},
        )

        return ResourceNotFoundError(
            message=f'{model_name} not found',
            error_code=f'{model_name.lower()}_not_found',
            context={'identifier': identifier, 'model': model_name, **context},
        )

    def handle_exception(self, error: Exception, context: dict[str, Any]) -> Exception:
        """Return the business exception matching ``error``."""
        for error_type, handler in self.error_mappings.items():
            if isinstance(error, error_type):
                return handler(error, context)

        logger.error(
            f'Unexpected error in {self.operation_type}: {error}',
            extra={'operation': self.operation_type, 'context': context},
            exc_info=True,
        )

        return ServiceUnavailableError(
            message=f'Unexpected database error: {error!s}',
            error_code=f'{self.operation_type}_unexpected_error',
            context={'original_error': str(error), 'unexpected': True, **context},
        )


def handle_db_errors(operation_type: str = None, model_name: str = None):
    """
    Decorator for centralized database error handling in DAL methods.

    Business exceptions raised inside the method pass through untouched.

    Usage:
        @handle_db_errors(operation_type='create', model_name='Workshop')
        def create_workshop(self, data: dict) -> Workshop:
            return Workshop.objects.create(**data)
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs) -> Any:
            detected_operation = operation_type or _detect_operation(func.__name__)

            try:
                return func(self, *args, **kwargs)
            except AppError:
                raise
            except Exception as e:
                context = {
                    'method': func.__name__,
                    'class': self.__class__.__name__,
                    'operation': detected_operation,
                }
                if model_name:
                    context['model_name'] = model_name
                if args:
                    context['identifier'] = str(args[0])

                business_exception = DatabaseErrorHandler(detected_operation).handle_exception(e, context)
                raise business_exception from e

        return wrapper

    return decorator


def _detect_operation(method_name: str) -> str:
    method_name = method_name.lower()
    if method_name.startswith('create'):
        return 'create'
    if method_name.startswith(('get', 'find', 'fetch', 'list')):
        return 'read'
    if method_name.startswith(('update', 'set', 'toggle', 'upsert')):
        return 'update'
    if method_name.startswith('delete'):
        return 'delete'
    return method_name

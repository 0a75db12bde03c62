"""
Shared exceptions for the workshop back-office.

This module provides:
1. Core business exceptions (core_exceptions.py)
2. Storage infrastructure exceptions (exception.py)

Import business exceptions from core_exceptions for clean architecture.
"""

from apps.shared.exceptions.core_exceptions import AppError
from apps.shared.exceptions.core_exceptions import AuthenticationError
from apps.shared.exceptions.core_exceptions import BusinessRuleViolation
from apps.shared.exceptions.core_exceptions import ConfigurationError
from apps.shared.exceptions.core_exceptions import PermissionError
from apps.shared.exceptions.core_exceptions import ResourceNotFoundError
from apps.shared.exceptions.core_exceptions import ServiceUnavailableError
from apps.shared.exceptions.core_exceptions import ValidationError
from apps.shared.exceptions.exception import StorageBucketNotFoundError
from apps.shared.exceptions.exception import StorageServiceError
from apps.shared.exceptions.exception import StorageUploadError

__all__ = [
    # Core business exceptions
    'AppError',
    'AuthenticationError',
    'BusinessRuleViolation',
    'ConfigurationError',
    'PermissionError',
    'ResourceNotFoundError',
    'ServiceUnavailableError',
    'ValidationError',
    # Storage infrastructure exceptions
    'StorageBucketNotFoundError',
    'StorageServiceError',
    'StorageUploadError',
]

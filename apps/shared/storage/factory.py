# apps/shared/storage/factory.py
from django.conf import settings

from apps.shared.exceptions import ConfigurationError

from .base import AbstractStorageService
from .s3_storage import S3StorageService


class StorageFactory:
    """
    Factory for storage services.
    Strategy registry keyed by provider name.
    """

    _providers = {
        's3': S3StorageService,
    }

    @classmethod
    def create_storage_service(cls, provider: str) -> AbstractStorageService:
        """
        Create the storage service for ``provider``.

        Raises:
            ConfigurationError: If the provider is not registered
        """
        if provider not in cls._providers:
            supported = ', '.join(cls._providers.keys())
            raise ConfigurationError(
                f'Unsupported storage provider: {provider}. Supported providers: {supported}',
                error_code='unsupported_storage_provider',
                context={'provider': provider},
            )

        return cls._providers[provider]()


def get_storage_service(provider: str | None = None) -> AbstractStorageService:
    """Storage service for ``provider`` (defaults to settings.STORAGE_PROVIDER)."""
    return StorageFactory.create_storage_service(provider or settings.STORAGE_PROVIDER)


def get_bucket_name(alias: str) -> str:
    """
    Resolve a logical bucket alias ('event_photos', 'partners', ...) to its name.

    Raises:
        ConfigurationError: If the alias is not configured
    """
    try:
        return settings.STORAGE_BUCKETS[alias]
    except KeyError:
        raise ConfigurationError(
            f'Unknown storage bucket alias: {alias}',
            error_code='unknown_storage_bucket',
            context={'alias': alias},
        ) from None

"""Shared app configuration."""

from django.apps import AppConfig


class SharedConfig(AppConfig):
    """Storage, authentication and the cross-app service container."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.shared'
    verbose_name = 'Shared'

from django.apps import AppConfig


class ContractsConfig(AppConfig):
    """Contract templates, trainer assignments and client contracts."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.contracts'
    verbose_name = 'Contracts Management'

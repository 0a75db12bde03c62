from django.apps import AppConfig


class WorkshopsConfig(AppConfig):
    """Workshops, their trainers, registrations and guidelines."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.workshops'
    verbose_name = 'Workshops Management'

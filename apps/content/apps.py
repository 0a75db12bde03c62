from django.apps import AppConfig


class ContentConfig(AppConfig):
    """Public site content: testimonials, FAQs, press, media, partners, initiatives."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.content'
    verbose_name = 'Site Content'

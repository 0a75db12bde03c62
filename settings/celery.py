"""Celery configuration for the workshop back-office."""

import os

from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'settings.main')

app = Celery('workshop_backoffice')

# Task behaviour (eager mode, routes, limits) comes from the CELERY_* settings.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

app.conf.update(
    worker_hijack_root_logger=False,
    worker_log_color=False,
    result_persistent=True,
)


@app.task(bind=True)
def health_check(self):
    """Health check task for monitoring."""
    return {'status': 'healthy', 'worker_id': self.request.id}

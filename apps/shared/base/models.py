"""
Shared models for the application
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class BaseModel(models.Model):
    """Base model with created_at and updated_at fields"""

    created_at = models.DateTimeField(_('Created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated at'), auto_now=True)

    class Meta:
        abstract = True


class OrderedModel(BaseModel):
    """Base model for records displayed in a manual order (drag and drop)."""

    order = models.PositiveIntegerField(_('Order'), default=0, db_index=True)

    class Meta:
        abstract = True

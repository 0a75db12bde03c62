from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel
from apps.shared.utils.codes import generate_workshop_password


def default_available_tools() -> dict:
    """Tools offered to participants unless the workshop says otherwise."""
    return {
        'chatbot': True,
        'resources': False,
        'automation': True,
        'audio_music': True,
        'experiments': False,
        'image_generation': True,
        'video_generation': True,
    }


class WorkshopQuerySet(models.QuerySet):
    def newest_first(self):
        return self.order_by('-date')

    def for_date(self, workshop_date):
        return self.filter(date=workshop_date)


class Workshop(BaseModel):
    """
    A dated workshop. Its date is the natural key every child record
    (trainers, registrations, contracts, guidelines) refers to.
    """

    date = models.DateField(_('Workshop date'), unique=True)

    password = models.CharField(
        _('Access password'),
        max_length=64,
        default=generate_workshop_password,
        help_text=_('Password participants use to open the workshop tools'),
    )

    available_tools = models.JSONField(_('Available tools'), default=default_available_tools, blank=True)

    objects = WorkshopQuerySet.as_manager()

    class Meta:
        verbose_name = _('Workshop')
        verbose_name_plural = _('Workshops')
        ordering = ['-date']

    def __str__(self):
        return f'Workshop {self.date}'

from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class WorkshopGuidelines(BaseModel):
    """Markdown instructions shown to the trainers of one workshop."""

    workshop = models.OneToOneField(
        'workshops.Workshop',
        to_field='date',
        db_column='workshop_date',
        on_delete=models.CASCADE,
        related_name='guidelines',
        verbose_name=_('Workshop'),
    )

    guidelines_markdown = models.TextField(_('Guidelines (markdown)'), blank=True)

    class Meta:
        verbose_name = _('Workshop guidelines')
        verbose_name_plural = _('Workshop guidelines')
        ordering = ['-workshop_id']

    def __str__(self):
        return f'Guidelines {self.workshop_id}'

    @property
    def workshop_date(self):
        return self.workshop_id

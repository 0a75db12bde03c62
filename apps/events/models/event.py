from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel
from apps.shared.base.models import OrderedModel


class EventQuerySet(models.QuerySet):
    """QuerySet for public site events"""

    def newest_first(self):
        return self.order_by('-date')

    def search(self, search_term):
        if not search_term:
            return self
        return self.filter(
            models.Q(occasion__icontains=search_term)
            | models.Q(location__icontains=search_term)
            | models.Q(description__icontains=search_term)
        )


class Event(BaseModel):
    """
    Past or upcoming event shown on the public site.

    ``people`` is a free-form JSON object (speakers, partners, hosts...)
    rendered by the site as-is.
    """

    occasion = models.CharField(_('Occasion'), max_length=255)
    date = models.DateField(_('Event date'), db_index=True)
    location = models.CharField(_('Location'), max_length=255, blank=True)
    description = models.TextField(_('Description'), blank=True, default='')
    people = models.JSONField(_('People'), default=dict, blank=True)

    objects = EventQuerySet.as_manager()

    class Meta:
        verbose_name = _('Event')
        verbose_name_plural = _('Events')
        ordering = ['-date']

    def __str__(self):
        return f'{self.occasion} ({self.date})'

    def clean(self):
        super().clean()
        if not isinstance(self.people, dict):
            raise ValidationError({'people': _('People must be a JSON object')})

    def save(self, *args, **kwargs):
        if self.occasion:
            self.occasion = self.occasion.strip()
        if self.location:
            self.location = self.location.strip()
        if self.description:
            self.description = self.description.strip()

        self.clean()
        super().save(*args, **kwargs)


class EventPhoto(OrderedModel):
    """Photo of an event; ``src`` is a key in the event photos bucket."""

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name='photos',
        verbose_name=_('Event'),
    )
    src = models.CharField(_('Image'), max_length=500)
    alt = models.CharField(_('Alternative text'), max_length=255, blank=True)

    class Meta:
        verbose_name = _('Event photo')
        verbose_name_plural = _('Event photos')
        ordering = ['order', 'id']
        indexes = [
            models.Index(fields=['event', 'order'], name='event_photo_order_idx'),
        ]

    def __str__(self):
        return f'Photo {self.order} of {self.event_id}'

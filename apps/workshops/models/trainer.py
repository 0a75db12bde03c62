from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel
from apps.shared.utils.codes import generate_trainer_code


class WorkshopTrainerQuerySet(models.QuerySet):
    def for_workshop(self, workshop_date):
        return self.filter(workshop_id=workshop_date)

    def newest_first(self):
        return self.order_by('-workshop_id', 'trainer_code')


class WorkshopTrainer(BaseModel):
    """
    A claimable trainer slot of a workshop, identified by its code.

    Registrations point at trainers by ``trainer_code``, which is unique
    across all workshops.
    """

    workshop = models.ForeignKey(
        'workshops.Workshop',
        to_field='date',
        db_column='workshop_date',
        on_delete=models.CASCADE,
        related_name='trainers',
        verbose_name=_('Workshop'),
    )

    trainer_code = models.CharField(
        _('Trainer code'),
        max_length=32,
        unique=True,
        default=generate_trainer_code,
    )

    is_claimed = models.BooleanField(_('Claimed'), default=False)
    is_abandoned = models.BooleanField(_('Abandoned'), default=False)
    code_sent = models.BooleanField(_('Code sent'), default=False)

    objects = WorkshopTrainerQuerySet.as_manager()

    class Meta:
        verbose_name = _('Workshop trainer')
        verbose_name_plural = _('Workshop trainers')
        ordering = ['-workshop_id', 'trainer_code']
        indexes = [
            models.Index(fields=['workshop', 'is_abandoned'], name='trainer_workshop_active_idx'),
        ]

    def __str__(self):
        return f'{self.trainer_code} ({self.workshop_id})'

    @property
    def workshop_date(self):
        return self.workshop_id

    def save(self, *args, **kwargs):
        if self.trainer_code:
            self.trainer_code = self.trainer_code.strip().upper()
        super().save(*args, **kwargs)

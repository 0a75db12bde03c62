from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class ContractAssignment(BaseModel):
    """Binds one trainer to one trainer-type contract template."""

    trainer = models.ForeignKey(
        'workshops.WorkshopTrainer',
        on_delete=models.CASCADE,
        related_name='contract_assignments',
        verbose_name=_('Trainer'),
    )

    contract_template = models.ForeignKey(
        'contracts.ContractTemplate',
        on_delete=models.CASCADE,
        related_name='assignments',
        verbose_name=_('Contract template'),
    )

    class Meta:
        verbose_name = _('Contract assignment')
        verbose_name_plural = _('Contract assignments')
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['trainer'], name='unique_contract_assignment_per_trainer'),
        ]

    def __str__(self):
        return f'{self.trainer_id} -> {self.contract_template_id}'

from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class ContractTemplateQuerySet(models.QuerySet):
    def for_workshop(self, workshop_date):
        return self.filter(workshop_id=workshop_date)

    def of_type(self, template_type):
        return self.filter(type=template_type)

    def listing_order(self):
        return self.order_by('type', '-workshop_id', 'name')


class ContractTemplate(BaseModel):
    """Markdown contract with placeholder tokens, owned by one workshop."""

    class Type(models.TextChoices):
        TRAINER = 'trainer', _('Trainer')
        CLIENT = 'client', _('Client')

    workshop = models.ForeignKey(
        'workshops.Workshop',
        to_field='date',
        db_column='workshop_date',
        on_delete=models.CASCADE,
        related_name='contract_templates',
        verbose_name=_('Workshop'),
    )

    name = models.CharField(_('Name'), max_length=255)
    content_markdown = models.TextField(_('Content (markdown)'))
    type = models.CharField(_('Type'), max_length=16, choices=Type.choices, default=Type.TRAINER, db_index=True)
    is_volunteer = models.BooleanField(_('Volunteer contract'), default=False)

    objects = ContractTemplateQuerySet.as_manager()

    class Meta:
        verbose_name = _('Contract template')
        verbose_name_plural = _('Contract templates')
        ordering = ['type', '-workshop_id', 'name']

    def __str__(self):
        return f'{self.name} ({self.get_type_display()}, {self.workshop_id})'

    @property
    def workshop_date(self):
        return self.workshop_id

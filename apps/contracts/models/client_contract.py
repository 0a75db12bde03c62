from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel
from apps.shared.utils.codes import generate_signature_code


class ClientContract(BaseModel):
    """The single contract between the organizer and the paying client of a workshop."""

    workshop = models.OneToOneField(
        'workshops.Workshop',
        to_field='date',
        db_column='workshop_date',
        on_delete=models.CASCADE,
        related_name='client_contract',
        verbose_name=_('Workshop'),
    )

    contract_template = models.ForeignKey(
        'contracts.ContractTemplate',
        on_delete=models.PROTECT,
        related_name='client_contracts',
        verbose_name=_('Contract template'),
    )

    client_company_name = models.CharField(_('Client company'), max_length=255)
    client_representative_name = models.CharField(_('Client representative'), max_length=255)
    client_address = models.TextField(_('Client address'))
    client_email = models.EmailField(_('Client email'))
    client_company_registration = models.CharField(_('SIRET / NDA'), max_length=64, blank=True)

    signature_code = models.CharField(_('Signature code'), max_length=32, unique=True, default=generate_signature_code)
    is_signed = models.BooleanField(_('Signed'), default=False)
    signed_at = models.DateTimeField(_('Signed at'), null=True, blank=True)
    code_sent = models.BooleanField(_('Code sent'), default=False)
    payment_received = models.BooleanField(_('Payment received'), default=False)

    class Meta:
        verbose_name = _('Client contract')
        verbose_name_plural = _('Client contracts')
        ordering = ['-workshop_id']

    def __str__(self):
        return f'{self.client_company_name} ({self.workshop_id})'

    @property
    def workshop_date(self):
        return self.workshop_id

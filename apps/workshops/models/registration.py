from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel

# Stored in invoice_file_url when a volunteer trainer sends no motivation letter
VOLUNTEER_NO_MOTIVATION_PLACEHOLDER = 'volunteer_no_motivation_provided'


class TrainerRegistrationQuerySet(models.QuerySet):
    def for_workshop(self, workshop_date):
        return self.filter(workshop_id=workshop_date)

    def newest_first(self):
        return self.order_by('-registered_at')


class TrainerRegistration(BaseModel):
    """
    Form submitted by a trainer who claimed a code: identity, consents,
    company details used in the contract and uploaded documents.
    """

    workshop = models.ForeignKey(
        'workshops.Workshop',
        to_field='date',
        db_column='workshop_date',
        on_delete=models.CASCADE,
        related_name='registrations',
        verbose_name=_('Workshop'),
    )

    trainer = models.ForeignKey(
        'workshops.WorkshopTrainer',
        to_field='trainer_code',
        db_column='trainer_code',
        on_delete=models.CASCADE,
        related_name='registrations',
        verbose_name=_('Trainer'),
    )

    first_name = models.CharField(_('First name'), max_length=150)
    last_name = models.CharField(_('Last name'), max_length=150)
    phone = models.CharField(_('Phone'), max_length=40, blank=True)
    email = models.EmailField(_('Email'))

    privacy_policy_accepted = models.BooleanField(_('Privacy policy accepted'), default=False)
    image_consent_accepted = models.BooleanField(_('Image consent accepted'), default=False)
    professional_compliance_accepted = models.BooleanField(_('Professional compliance accepted'), default=False)
    event_guidelines_accepted = models.BooleanField(_('Event guidelines accepted'), default=False)
    volunteer_attestation_accepted = models.BooleanField(_('Volunteer attestation accepted'), default=False)
    contract_accepted = models.BooleanField(
        _('Contract accepted'),
        default=False,
        help_text=_('Once accepted the contract assignment of the trainer is locked'),
    )

    # Keys (or legacy full URLs) in the trainer documents bucket
    invoice_file_url = models.CharField(_('Invoice or motivation letter'), max_length=500, blank=True)
    rib_file_url = models.CharField(_('Bank details (RIB)'), max_length=500, blank=True)

    is_paid = models.BooleanField(_('Paid'), default=False)
    registered_at = models.DateTimeField(_('Registered at'), default=timezone.now, db_index=True)

    company_name = models.CharField(_('Company name'), max_length=255, blank=True)
    company_legal_form = models.CharField(_('Legal form'), max_length=100, blank=True)
    company_capital = models.CharField(_('Share capital'), max_length=100, blank=True)
    company_rcs = models.CharField(_('RCS city'), max_length=100, blank=True)
    company_rcs_number = models.CharField(_('RCS number'), max_length=100, blank=True)
    company_address = models.TextField(_('Registered office address'), blank=True)
    company_short_name = models.CharField(_('Company short name'), max_length=100, blank=True)
    representative_name = models.CharField(_('Representative name'), max_length=255, blank=True)
    representative_function = models.CharField(_('Representative function'), max_length=255, blank=True)
    representative_email = models.EmailField(_('Representative email'), blank=True)

    objects = TrainerRegistrationQuerySet.as_manager()

    class Meta:
        verbose_name = _('Trainer registration')
        verbose_name_plural = _('Trainer registrations')
        ordering = ['-registered_at']
        indexes = [
            models.Index(fields=['workshop', 'registered_at'], name='registration_workshop_idx'),
        ]

    def __str__(self):
        return f'{self.first_name} {self.last_name} ({self.trainer_id})'

    @property
    def trainer_code(self):
        return self.trainer_id

    @property
    def workshop_date(self):
        return self.workshop_id

    @property
    def has_motivation_placeholder(self) -> bool:
        return VOLUNTEER_NO_MOTIVATION_PLACEHOLDER in (self.invoice_file_url or '')

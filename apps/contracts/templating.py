"""
Placeholder substitution for contract templates.

Templates are markdown documents containing bracketed tokens such as
``[NOM_ENTREPRISE]`` or ``[CLIENT_EMAIL]``. Two closed vocabularies exist,
one per contract kind, sharing ``[DATE_DU_JOUR]``.

``resolve`` is total: it never raises, and any token without a value is
left in the output verbatim. Values are inserted literally in a single
pass over the template, so a value that itself contains a token is never
expanded again.
"""

import re
from collections.abc import Callable
from collections.abc import Mapping
from datetime import date
from datetime import datetime
from enum import Enum

from django.conf import settings
from django.utils import dateformat
from django.utils import timezone
from django.utils import translation

TOKEN_PATTERN = re.compile(r'\[([A-Z_]+)\]')

PENDING_SIGNATURE_STATUS = 'En attente de signature'


class Placeholder(str, Enum):
    # Trainer contracts (company of the trainer)
    NOM_ENTREPRISE = 'NOM_ENTREPRISE'
    FORME_JURIDIQUE = 'FORME_JURIDIQUE'
    CAPITAL_SOCIAL = 'CAPITAL_SOCIAL'
    RCS_VILLE = 'RCS_VILLE'
    NUMERO_RCS = 'NUMERO_RCS'
    ADRESSE_SIEGE = 'ADRESSE_SIEGE'
    NOM_REPRESENTANT = 'NOM_REPRESENTANT'
    FONCTION_REPRESENTANT = 'FONCTION_REPRESENTANT'
    NOM_ABREGE_ENTREPRISE = 'NOM_ABREGE_ENTREPRISE'
    EMAIL_REPRESENTANT = 'EMAIL_REPRESENTANT'

    # Client contracts
    CLIENT_COMPANY_NAME = 'CLIENT_COMPANY_NAME'
    CLIENT_REPRESENTATIVE_NAME = 'CLIENT_REPRESENTATIVE_NAME'
    CLIENT_ADDRESS = 'CLIENT_ADDRESS'
    CLIENT_EMAIL = 'CLIENT_EMAIL'
    CLIENT_COMPANY_REGISTRATION = 'CLIENT_COMPANY_REGISTRATION'
    SIGNATURE_CODE = 'SIGNATURE_CODE'
    WORKSHOP_DATE = 'WORKSHOP_DATE'
    SIGNATURE_STATUS = 'SIGNATURE_STATUS'

    # Shared, always computed at resolution time
    DATE_DU_JOUR = 'DATE_DU_JOUR'

    @property
    def token(self) -> str:
        return f'[{self.value}]'


TRAINER_PLACEHOLDERS = frozenset(
    {
        Placeholder.NOM_ENTREPRISE,
        Placeholder.FORME_JURIDIQUE,
        Placeholder.CAPITAL_SOCIAL,
        Placeholder.RCS_VILLE,
        Placeholder.NUMERO_RCS,
        Placeholder.ADRESSE_SIEGE,
        Placeholder.NOM_REPRESENTANT,
        Placeholder.FONCTION_REPRESENTANT,
        Placeholder.NOM_ABREGE_ENTREPRISE,
        Placeholder.EMAIL_REPRESENTANT,
        Placeholder.DATE_DU_JOUR,
    }
)

CLIENT_PLACEHOLDERS = frozenset(
    {
        Placeholder.CLIENT_COMPANY_NAME,
        Placeholder.CLIENT_REPRESENTATIVE_NAME,
        Placeholder.CLIENT_ADDRESS,
        Placeholder.CLIENT_EMAIL,
        Placeholder.CLIENT_COMPANY_REGISTRATION,
        Placeholder.SIGNATURE_CODE,
        Placeholder.WORKSHOP_DATE,
        Placeholder.DATE_DU_JOUR,
        Placeholder.SIGNATURE_STATUS,
    }
)

# Keyed by ContractTemplate.Type values
VOCABULARIES = {
    'trainer': TRAINER_PLACEHOLDERS,
    'client': CLIENT_PLACEHOLDERS,
}

PLACEHOLDER_NAMES = frozenset(p.value for p in Placeholder)


def format_long_date(value: date | datetime | str, language: str | None = None) -> str:
    """
    Long French date: ``19 octobre 2026``.

    Aware datetimes are converted to the current time zone first.
    """
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    if isinstance(value, datetime):
        value = timezone.localtime(value).date() if timezone.is_aware(value) else value.date()

    with translation.override(language or settings.CONTRACT_DATE_LANGUAGE):
        return dateformat.format(value, 'j F Y')


def resolve(
    template: str,
    context: Mapping[Placeholder, str],
    kind: str | None = None,
    today: date | None = None,
) -> str:
    """
    Replace every token of ``context`` in ``template``.

    Args:
        template: Markdown with bracketed tokens
        context: Value per placeholder; ``None`` means "no value"
        kind: 'trainer' or 'client' to restrict substitution to that
            vocabulary; tokens of the other vocabulary are left untouched
        today: Date used for ``[DATE_DU_JOUR]`` (defaults to the local date)

    ``[DATE_DU_JOUR]`` is always substituted and cannot be supplied by callers.
    """
    allowed = VOCABULARIES.get(kind, PLACEHOLDER_NAMES)

    values = {}
    for placeholder, value in context.items():
        if placeholder not in PLACEHOLDER_NAMES or placeholder == Placeholder.DATE_DU_JOUR:
            continue
        if value is None or placeholder not in allowed:
            continue
        values[Placeholder(placeholder).value] = str(value)

    values[Placeholder.DATE_DU_JOUR.value] = format_long_date(today or timezone.localdate())

    def substitute(match: re.Match) -> str:
        return values.get(match.group(1), match.group(0))

    return TOKEN_PATTERN.sub(substitute, template)


def unresolved_placeholders(text: str) -> list[str]:
    """Known placeholder tokens still present in ``text``, in order of first appearance."""
    found = []
    for name in TOKEN_PATTERN.findall(text):
        if name in PLACEHOLDER_NAMES and name not in found:
            found.append(name)
    return found


# Registration field feeding each trainer placeholder
TRAINER_FIELD_SOURCES = {
    Placeholder.NOM_ENTREPRISE: 'company_name',
    Placeholder.FORME_JURIDIQUE: 'company_legal_form',
    Placeholder.CAPITAL_SOCIAL: 'company_capital',
    Placeholder.RCS_VILLE: 'company_rcs',
    Placeholder.NUMERO_RCS: 'company_rcs_number',
    Placeholder.ADRESSE_SIEGE: 'company_address',
    Placeholder.NOM_ABREGE_ENTREPRISE: 'company_short_name',
    Placeholder.NOM_REPRESENTANT: 'representative_name',
    Placeholder.FONCTION_REPRESENTANT: 'representative_function',
    Placeholder.EMAIL_REPRESENTANT: 'representative_email',
}


def build_trainer_context(registration) -> dict[Placeholder, str]:
    """
    Context for a trainer contract.

    Empty company or representative fields are omitted, so their tokens
    stay visible in the rendered contract.
    """
    context = {}
    for placeholder, field_name in TRAINER_FIELD_SOURCES.items():
        value = getattr(registration, field_name, None)
        if value:
            context[placeholder] = str(value)
    return context


def signature_status(client_contract) -> str:
    if client_contract.is_signed and client_contract.signed_at:
        return f'Signé le {format_long_date(client_contract.signed_at)}'
    return PENDING_SIGNATURE_STATUS


CLIENT_VALUE_PROVIDERS: dict[Placeholder, Callable] = {
    Placeholder.CLIENT_COMPANY_NAME: lambda contract: contract.client_company_name,
    Placeholder.CLIENT_REPRESENTATIVE_NAME: lambda contract: contract.client_representative_name,
    Placeholder.CLIENT_ADDRESS: lambda contract: contract.client_address,
    Placeholder.CLIENT_EMAIL: lambda contract: contract.client_email,
    Placeholder.CLIENT_COMPANY_REGISTRATION: lambda contract: contract.client_company_registration or '',
    Placeholder.SIGNATURE_CODE: lambda contract: contract.signature_code,
    Placeholder.WORKSHOP_DATE: lambda contract: format_long_date(contract.workshop_date),
    Placeholder.SIGNATURE_STATUS: signature_status,
}


def build_client_context(client_contract) -> dict[Placeholder, str]:
    """Context for a client contract; the registration number may be blank."""
    return {placeholder: provider(client_contract) for placeholder, provider in CLIENT_VALUE_PROVIDERS.items()}
